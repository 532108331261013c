"""Amped Finance agent functions for the Sonic chain."""
