"""
CustomTkinter user interface for Vocabulary Analyzer.

Import MainWindow from vocab_analyzer.ui.main_window; this package does
not import the GUI toolkit on its own.
"""
