"""Desk configurator storefront - pricing and dimension validation backend."""
