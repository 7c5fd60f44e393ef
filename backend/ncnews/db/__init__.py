"""Database Package - declarative Base and seeding helpers."""
