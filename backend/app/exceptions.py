"""
Exceptions métier levées par la couche service.
Chacune est traduite en réponse JSON {"error": ...} par les handlers de app.main.

    InvalidInputError     → 400 (paramètre, identifiant ou contenu invalide)
    NotFoundError         → 404 (aucun enregistrement, aucun résultat de recherche)
    StoreUnavailableError → 500 (base de données injoignable ou en erreur)
"""


class ApiError(Exception):
    """Base commune : porte le message destiné au client et le code HTTP."""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidInputError(ApiError):
    status_code = 400


class NotFoundError(ApiError):
    status_code = 404


class StoreUnavailableError(ApiError):
    status_code = 500

    def __init__(self, message: str = "La base de données est indisponible."):
        super().__init__(message)
