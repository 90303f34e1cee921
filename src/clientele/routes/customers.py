from flask import Blueprint, current_app, jsonify, request

from clientele.customer import Customer

bp = Blueprint("customers", __name__)

REQUIRED_FIELDS = ("name", "email")


def _customer_from_request() -> tuple[Customer | None, str | None]:
    """Decode the JSON body into a Customer, or return an error message."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return None, "Request body must be a JSON object"

    missing = [field for field in REQUIRED_FIELDS if field not in data]
    if missing:
        return None, f"Missing required fields: {', '.join(missing)}"

    invalid = [
        field for field in REQUIRED_FIELDS if not isinstance(data[field], (str, type(None)))
    ]
    if invalid:
        return None, f"Fields must be strings or null: {', '.join(invalid)}"

    return Customer.from_dict(data), None


@bp.route("", methods=["GET"])
def list_customers():
    """List all customers."""
    customers = current_app.customer_service.list_all()
    return jsonify([c.to_dict() for c in customers])


@bp.route("", methods=["POST"])
def create_customer():
    """Create a new customer."""
    customer, error = _customer_from_request()
    if error:
        return jsonify({"error": error}), 400

    created = current_app.customer_service.create(customer)
    return jsonify(created.to_dict()), 201


@bp.route("/<int:customer_id>", methods=["GET"])
def get_customer(customer_id: int):
    """Get customer by ID."""
    customer = current_app.customer_service.get_by_id(customer_id)
    if customer is None:
        return jsonify({"error": "Customer not found"}), 404
    return jsonify(customer.to_dict())


@bp.route("/<int:customer_id>", methods=["PUT"])
def update_customer(customer_id: int):
    """Replace a customer's name and email."""
    customer, error = _customer_from_request()
    if error:
        return jsonify({"error": error}), 400

    updated = current_app.customer_service.update(customer_id, customer)
    if updated is None:
        return jsonify({"error": "Customer not found"}), 404
    return jsonify(updated.to_dict())


@bp.route("/<int:customer_id>", methods=["DELETE"])
def delete_customer(customer_id: int):
    """Delete a customer. Succeeds whether or not it existed."""
    current_app.customer_service.delete(customer_id)
    return "", 204
