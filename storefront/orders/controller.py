from quart import Blueprint, current_app, jsonify, request

bp = Blueprint("orders", __name__, url_prefix="/api")


@bp.post("/orders")
async def create_order():
    data = await request.get_json(force=True, silent=True)
    result = await current_app.extensions["order_service"].submit_order(data)
    if not result.ok:
        return jsonify({"message": "Validation error", "errors": result.errors}), 400
    return jsonify(result.order.to_dict()), 201


@bp.get("/orders/<order_id>")
async def order_detail(order_id: str):
    order = await current_app.extensions["order_service"].get_order(order_id)
    if order is None:
        return jsonify({"message": "Order not found"}), 404
    return jsonify(order.to_dict())
