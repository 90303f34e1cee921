"""
Customer

This module provides classes for storing and managing customer records.
"""

from clientele.customer.model import Customer
from clientele.customer.repository import CustomerRepository
from clientele.customer.service import CustomerService

__all__ = ["Customer", "CustomerRepository", "CustomerService"]
