"""Seed sample customers into the database."""
from clientele.customer import Customer, CustomerRepository

INITIAL_CUSTOMERS = [
    {"name": "Daya", "email": "daya@yopmail.com"},
    {"name": "Sanvi", "email": "sanvi@yopmail.com"},
    {"name": "Joe Goldberg", "email": "joe@example.com"},
]


def main():
    customer_repo = CustomerRepository()

    for customer in INITIAL_CUSTOMERS:
        existing = customer_repo.get_by_email(customer["email"])
        if existing:
            print(f"Skipping {customer['email']} - already exists (id={existing.id})")
            continue

        result = customer_repo.create(Customer(**customer))
        print(f"Created: {result.name} (id={result.id})")


if __name__ == "__main__":
    main()
