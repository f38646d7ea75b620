"""Comments on posts: create and delete."""
