"""
Comment Normalizer - rule-based extraction and cleanup of YouTube comment text.

Takes comment tables collected with tuber or vosonSML and returns records with
URLs, video timestamps, mentions, emoticons, emoji (with descriptions) and a
cleaned residual text.
"""

__version__ = "0.1.0"
