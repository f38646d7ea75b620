"""User registration, login and bearer-token verification."""
