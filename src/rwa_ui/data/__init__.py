"""
Static and demo data for the RWA Finance UI.

This package contains fixture data used by the demo services for
development, testing, and demonstrations without a running backend.

Modules:
- demo_fixtures: Enterprises, invoices, batches and a listed token market
"""
