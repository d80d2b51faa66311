# models.py

import math
from dataclasses import dataclass, asdict
from typing import Optional

from peewee import Model, AutoField, CharField, FloatField

from .errors import ValidationError

# Catégories proposées dans les formulaires (indicatif seulement, non imposé)
CATEGORIES = ["fruit", "vegetable", "dairy"]


class BaseModel(Model):
    # La base est liée au démarrage par ProductRepository (database.bind)
    class Meta:
        database = None


class Product(BaseModel):
    """
    Produit du kiosque fermier.
      - id       : identifiant auto-incrémenté, attribué par la base
      - name     : nom du produit (CharField)
      - price    : prix (FloatField)
      - category : catégorie libre, normalement une valeur de CATEGORIES
    """
    id = AutoField()
    name = CharField()
    price = FloatField()
    category = CharField()

    class Meta:
        table_name = 'products'


@dataclass
class ProductFields:
    """
    Champs d'un produit tels que reçus d'un formulaire, après conversion.
    Un champ à None n'a pas été fourni (mise à jour partielle).
    """
    name: Optional[str] = None
    price: Optional[float] = None
    category: Optional[str] = None

    @classmethod
    def from_form(cls, form, partial=False):
        """
        Construit les champs depuis request.form (ou tout mapping).
        Les champs inconnus (ex. _method) sont ignorés.

        partial=False : name, price et category sont obligatoires (création).
        partial=True  : seuls les champs présents et non vides seront remplacés.
        """
        name = form.get('name')
        category = form.get('category')
        raw_price = form.get('price')

        if name is not None:
            name = name.strip()
        if category is not None:
            category = category.strip()
        if partial:
            # Champ vidé dans le formulaire d'édition : on garde la valeur stockée
            name = name or None
            category = category or None

        price = None
        if raw_price is not None and str(raw_price).strip() != '':
            try:
                price = float(raw_price)
            except (ValueError, TypeError):
                raise ValidationError("Le prix doit être un nombre", field='price')
            if not math.isfinite(price):
                raise ValidationError("Le prix doit être un nombre", field='price')
        elif raw_price is not None and not partial:
            raise ValidationError("Le prix est obligatoire", field='price')

        if not partial:
            if not name:
                raise ValidationError("Le nom est obligatoire", field='name')
            if price is None:
                raise ValidationError("Le prix est obligatoire", field='price')
            if not category:
                raise ValidationError("La catégorie est obligatoire", field='category')

        return cls(name=name, price=price, category=category)

    def as_dict(self):
        """Uniquement les champs fournis."""
        return {k: v for k, v in asdict(self).items() if v is not None}
