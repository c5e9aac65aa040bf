"""DRRM dashboard web application."""
