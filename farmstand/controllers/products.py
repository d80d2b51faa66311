# controllers/products.py

from flask import (
    Blueprint, abort, current_app, make_response, redirect, render_template,
    request, url_for
)

from ..errors import ValidationError
from ..models import CATEGORIES, ProductFields

bp = Blueprint('products', __name__, url_prefix='/products')


def get_repository():
    return current_app.extensions['farmstand.repository']


def _find_or_404(product_id):
    product = get_repository().find_by_id(product_id)
    if product is None:
        abort(404, description=f"Le produit d'ID {product_id} n'existe pas")
    return product


@bp.route('', methods=['GET'])
def index():
    """
    GET /products
    Liste de tous les produits, dans l'ordre d'insertion.
    """
    products = get_repository().find_all()
    return render_template('products/index.html', products=products)


@bp.route('/new', methods=['GET'])
def new():
    """
    GET /products/new
    Formulaire de création, avec la liste des catégories.
    """
    return render_template('products/new.html', categories=CATEGORIES, product=None)


@bp.route('', methods=['POST'])
def create():
    """
    POST /products
    Corps (formulaire) : name, price, category

    Réponses :
      - 302 Found + Location: /products/<id>
      - 400 + formulaire réaffiché si un champ manque ou si le prix n'est pas un nombre
    """
    try:
        fields = ProductFields.from_form(request.form)
    except ValidationError as err:
        return make_response(render_template(
            'products/new.html', categories=CATEGORIES,
            product=request.form, error=err.message
        ), err.status_code)

    product = get_repository().create(fields)
    current_app.logger.info("Produit %s créé", product.id)
    return redirect(url_for('products.show', product_id=product.id))


@bp.route('/<int:product_id>', methods=['GET'])
def show(product_id):
    """
    GET /products/<id>
    Détail d'un produit ; 404 s'il n'existe pas.
    """
    product = _find_or_404(product_id)
    return render_template('products/show.html', product=product)


@bp.route('/<int:product_id>/edit', methods=['GET'])
def edit(product_id):
    """
    GET /products/<id>/edit
    Formulaire pré-rempli ; 404 si le produit n'existe pas.
    """
    product = _find_or_404(product_id)
    return render_template('products/edit.html', product=product, categories=CATEGORIES)


@bp.route('/<int:product_id>', methods=['PUT', 'PATCH'])
def update(product_id):
    """
    PUT /products/<id>   (POST /products/<id>?_method=PUT depuis un formulaire)
    Remplace les champs fournis (name, price, category).

    Réponses :
      - 302 Found + Location: /products/<id>
      - 400 + formulaire réaffiché si le prix n'est pas un nombre
      - 404 si le produit n'existe pas
    """
    repository = get_repository()
    try:
        fields = ProductFields.from_form(request.form, partial=True)
    except ValidationError as err:
        product = _find_or_404(product_id)
        # Valeurs saisies par-dessus l'enregistrement, pour réafficher le formulaire
        values = {
            'id': product.id,
            'name': product.name,
            'price': product.price,
            'category': product.category,
        }
        values.update({k: v for k, v in request.form.items() if k in ('name', 'price', 'category')})
        return make_response(render_template(
            'products/edit.html', product=values,
            categories=CATEGORIES, error=err.message
        ), err.status_code)

    product = repository.update_by_id(product_id, fields)
    if product is None:
        abort(404, description=f"Le produit d'ID {product_id} n'existe pas")
    current_app.logger.info("Produit %s mis à jour", product.id)
    return redirect(url_for('products.show', product_id=product.id))


@bp.route('/<int:product_id>', methods=['DELETE'])
def delete(product_id):
    """
    DELETE /products/<id>   (POST /products/<id>?_method=DELETE depuis un formulaire)
    Supprime le produit s'il existe (sinon rien), puis 302 vers /products.
    """
    deleted = get_repository().delete_by_id(product_id)
    if deleted is not None:
        current_app.logger.info("Produit %s supprimé", product_id)
    return redirect(url_for('products.index'))
