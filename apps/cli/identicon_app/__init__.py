"""Command line front end for the identicon renderer."""
