"""
Version 1 of the API.

Bundles the resource, lookup and index data endpoints of the Bank
Back Office API.
"""
