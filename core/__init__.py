"""
Core module for shared domain infrastructure.

This module contains:
- Domain exceptions and value objects
- Service configuration
- Database helpers and middleware components
"""
