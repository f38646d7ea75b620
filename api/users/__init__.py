"""User profiles: public profile page data and bio editing."""
