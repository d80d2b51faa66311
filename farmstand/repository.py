# repository.py

import functools

from peewee import InterfaceError, OperationalError

from .errors import StoreUnavailable
from .models import Product


def _store_call(method):
    """Traduit les erreurs de connexion peewee en StoreUnavailable."""
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except (OperationalError, InterfaceError) as exc:
            raise StoreUnavailable(f"Base de données indisponible : {exc}") from exc
    return wrapper


class ProductRepository:
    """
    Accès aux produits à travers une seule connexion peewee,
    ouverte au démarrage et gardée pour toute la durée du processus.
    """

    def __init__(self, database):
        self.database = database
        self.database.bind([Product])

    def connect(self):
        """
        Ouvre la connexion et crée la table products si besoin.
        Lève StoreUnavailable si la base ne répond pas.
        """
        try:
            self.database.connect(reuse_if_open=True)
            self.database.create_tables([Product])
        except (OperationalError, InterfaceError) as exc:
            raise StoreUnavailable(f"Connexion à la base échouée : {exc}") from exc

    @_store_call
    def find_all(self):
        # Ordre d'insertion = ordre des id auto-incrémentés
        return list(Product.select().order_by(Product.id))

    @_store_call
    def find_by_id(self, product_id):
        return Product.get_or_none(Product.id == product_id)

    @_store_call
    def create(self, fields):
        return Product.create(**fields.as_dict())

    @_store_call
    def update_by_id(self, product_id, fields):
        """
        Remplace les champs fournis du produit. Retourne le produit à jour,
        ou None si l'id n'existe pas. Pas de contrôle de concurrence :
        le dernier qui écrit gagne.
        """
        product = Product.get_or_none(Product.id == product_id)
        if product is None:
            return None
        for name, value in fields.as_dict().items():
            setattr(product, name, value)
        product.save()
        return product

    @_store_call
    def delete_by_id(self, product_id):
        """Supprime le produit s'il existe ; retourne le produit supprimé ou None."""
        product = Product.get_or_none(Product.id == product_id)
        if product is None:
            return None
        product.delete_instance()
        return product
