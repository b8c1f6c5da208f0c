"""Shared services: Decimal money helpers and display currency conversion."""
