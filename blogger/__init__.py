"""Blogger Backend - blog and comment resource services."""
