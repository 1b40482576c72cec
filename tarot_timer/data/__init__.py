"""Static data tables for Tarot Timer."""
