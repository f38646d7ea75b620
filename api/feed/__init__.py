"""Main feed: every post, newest first, with authors and comments."""
