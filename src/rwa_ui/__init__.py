"""
RWA Finance UI: a Reflex application for invoice financing on tokenized assets.

Enterprises log in with a wallet signature, create and verify invoices, issue
them as batches and tokenize the batches. Investors buy tokens on the market
and follow the daily interest on their holdings.

Subpackages:
- components: Reflex page components
- lib: logging, caching, HTTP and wallet helpers
- models: Data models and serialization
- services: Backend access layer (demo and HTTP implementations)
- data: Demo fixtures

Main entry points:
- app.main(): Start the development server
- app.app: The Reflex application instance
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
