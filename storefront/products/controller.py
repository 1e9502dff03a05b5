from quart import Blueprint, current_app, jsonify

bp = Blueprint("products", __name__, url_prefix="/api")


@bp.get("/product")
async def active_product():
    product = await current_app.extensions["store"].get_active_product()
    if product is None:
        return jsonify({"message": "Product not found"}), 404
    return jsonify(product.to_dict())
