from flask import request, jsonify
from sitecms.application.media.delete_image import delete_image
from sitecms.application.media.update_image import update_image
from sitecms.application.media.upload_image import upload_image
from sitecms.errors import NotFound
from sitecms.extensions import db
from sitecms.models.image import Image
from sitecms.utils.decorators import permission_required
from . import v1_bp


@v1_bp.route("/media", methods=["GET"])
@permission_required("media.view")
def list_images():
    images = Image.query.order_by(Image.created_at.desc()).all()
    return jsonify({
        "success": True,
        "images": [image.to_dict() for image in images],
    }), 200


@v1_bp.route("/media", methods=["POST"])
@permission_required("media.upload")
def upload():
    image = upload_image(
        request.files.get("file"),
        title_en=request.form.get("title_en"),
        title_ar=request.form.get("title_ar"),
        alt_en=request.form.get("alt_en"),
        alt_ar=request.form.get("alt_ar"),
    )
    return jsonify({
        "success": True,
        "message": "Image uploaded successfully",
        "image": image.to_dict(),
    }), 201


@v1_bp.route("/media/<image_id>", methods=["GET"])
@permission_required("media.view")
def get_image(image_id):
    image = db.session.get(Image, image_id)
    if not image:
        raise NotFound("Image not found")
    return jsonify({"success": True, "image": image.to_dict()}), 200


@v1_bp.route("/media/<image_id>", methods=["PUT"])
@permission_required("media.edit")
def update(image_id):
    image = update_image(image_id=image_id, data=request.get_json(silent=True) or {})
    return jsonify({
        "success": True,
        "message": "Image updated successfully",
        "image": image.to_dict(),
    }), 200


@v1_bp.route("/media/<image_id>", methods=["DELETE"])
@permission_required("media.delete")
def delete(image_id):
    delete_image(image_id=image_id)
    return jsonify({"success": True, "message": "Image deleted"}), 200
