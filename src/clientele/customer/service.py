import logging
from typing import List, Optional

from clientele.customer.model import Customer
from clientele.customer.repository import CustomerRepository

logger = logging.getLogger(__name__)


class CustomerService:
    """
    Business rules for customer CRUD on top of a CustomerRepository.

    Lookups and updates that target a missing customer return None rather
    than raising, so callers can answer with a not-found response. Storage
    errors are not caught here.
    """

    def __init__(self, repository: CustomerRepository = None):
        self.repository = repository if repository is not None else CustomerRepository()

    def create(self, customer: Customer) -> Customer:
        """Persist a new customer. The store assigns the ID."""
        created = self.repository.create(Customer(name=customer.name, email=customer.email))
        logger.info("Created customer %s", created.id)
        return created

    def get_by_id(self, customer_id: int) -> Optional[Customer]:
        customer = self.repository.get_by_id(customer_id)
        if customer is None:
            logger.debug("Customer %s not found", customer_id)
        return customer

    def list_all(self) -> List[Customer]:
        return self.repository.list()

    def update(self, customer_id: int, customer: Customer) -> Optional[Customer]:
        """
        Overwrite name and email on an existing customer.

        The ID always comes from the stored record; any ID carried by the
        payload is ignored. Returns None, without writing, if there is no
        customer with ``customer_id``.
        """
        existing = self.repository.get_by_id(customer_id)
        if existing is None:
            logger.debug("Customer %s not found, nothing to update", customer_id)
            return None

        existing.name = customer.name
        existing.email = customer.email

        updated = self.repository.save(existing)
        logger.info("Updated customer %s", updated.id)
        return updated

    def delete(self, customer_id: int) -> None:
        """Delete a customer. Missing customers are ignored."""
        self.repository.delete(customer_id)
        logger.info("Deleted customer %s", customer_id)

    def delete_all(self) -> int:
        """Delete every customer. Returns how many were removed."""
        count = self.repository.delete_all()
        logger.info("Deleted all customers (%d)", count)
        return count
