"""Data-access layer for the LightBnB vacation-rental listing site."""
