"""A brick-breaking paddle game: game rules, pieces, pacing, sound and a pygame front end."""

__version__ = "0.1.0"