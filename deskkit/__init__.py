"""Small console tools: facility route optimisation, question generation, a product and expense ledger, and a TCP echo server and client."""

__version__ = "0.1.0"