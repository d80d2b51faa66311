# errors.py


class FarmStandError(Exception):
    """Erreur de base de l'application."""

    status_code = 500

    def __init__(self, message, **details):
        super().__init__(message)
        self.message = message
        self.details = details


class ValidationError(FarmStandError):
    """Formulaire produit incomplet ou prix non numérique."""

    status_code = 400

    def __init__(self, message, field=None):
        super().__init__(message, field=field)
        self.field = field


class StoreUnavailable(FarmStandError):
    """La base de données ne répond pas (connexion ou requête)."""

    status_code = 500
