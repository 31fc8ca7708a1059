"""Gif Search: a small server-rendered app echoing request values into views."""
