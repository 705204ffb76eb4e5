"""Imposter - a pass-the-device party game of hidden words."""
