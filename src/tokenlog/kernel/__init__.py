"""Kernel – errors and time primitives shared by the whole pipeline."""
