"""Date arithmetic for schedule placement."""
