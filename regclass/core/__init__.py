"""Service layer for the regclass command line."""
