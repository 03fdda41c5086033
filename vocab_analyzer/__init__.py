"""
Vocabulary Analyzer

Extracts frequency-ranked vocabulary from subtitles and text documents,
tracks the words a learner already knows, and drills them in timed
rehearsal sessions.
"""

__version__ = "1.0.0"
