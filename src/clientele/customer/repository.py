from typing import List, Optional

from clientele import db
from clientele.customer.model import Customer


class CustomerRepository:
    """
    Repository for customer data access.
    Encapsulates all SQL and queries for the customers table.
    """

    def get_by_id(self, customer_id: int) -> Optional[Customer]:
        """Get customer by ID."""
        row = db.fetch_one("SELECT * FROM customers WHERE id = %s", (customer_id,))
        return Customer.from_dict(row) if row else None

    def get_by_email(self, email: str) -> Optional[Customer]:
        """Get the first customer with the given email. Emails are not unique."""
        row = db.fetch_one(
            "SELECT * FROM customers WHERE email = %s ORDER BY id LIMIT 1",
            (email,),
        )
        return Customer.from_dict(row) if row else None

    def list(self) -> List[Customer]:
        """List all customers."""
        rows = db.fetch_all("SELECT * FROM customers ORDER BY id")
        return [Customer.from_dict(row) for row in rows]

    def exists(self, customer_id: int) -> bool:
        """Check whether a customer with this ID exists."""
        row = db.fetch_one(
            "SELECT EXISTS (SELECT 1 FROM customers WHERE id = %s) AS found",
            (customer_id,),
        )
        return bool(row["found"])

    def create(self, customer: Customer) -> Customer:
        """Insert a new customer. Any ID on the input is ignored; the database assigns one."""
        row = db.fetch_one(
            """
            INSERT INTO customers (name, email)
            VALUES (%s, %s)
            RETURNING *
            """,
            (customer.name, customer.email),
        )
        return Customer.from_dict(row)

    def save(self, customer: Customer) -> Customer:
        """
        Insert or update a customer.

        Without an ID this is a plain insert. With an ID, the row is
        inserted or its name and email are overwritten.
        """
        if customer.id is None:
            return self.create(customer)

        row = db.fetch_one(
            """
            INSERT INTO customers (id, name, email)
            VALUES (%s, %s, %s)
            ON CONFLICT (id) DO UPDATE
                SET name = EXCLUDED.name,
                    email = EXCLUDED.email
            RETURNING *
            """,
            (customer.id, customer.name, customer.email),
        )
        return Customer.from_dict(row)

    def delete(self, customer_id: int) -> None:
        """Delete a customer by ID. Deleting a missing ID is a no-op."""
        db.execute("DELETE FROM customers WHERE id = %s", (customer_id,))

    def delete_all(self) -> int:
        """Delete every customer. Returns the number of rows removed."""
        return db.execute("DELETE FROM customers")
