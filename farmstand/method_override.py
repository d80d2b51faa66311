# method_override.py

from werkzeug.wrappers import Request

# Verbes que l'on peut simuler par un POST
ALLOWED_METHODS = frozenset(['PUT', 'PATCH', 'DELETE'])


class MethodOverrideMiddleware:
    """
    Les formulaires HTML ne savent envoyer que GET et POST.
    Un POST vers /products/1?_method=PUT (ou avec l'en-tête
    X-HTTP-Method-Override: PUT) est réécrit en PUT avant d'atteindre Flask.

    Seuls les POST sont réécrits, et seulement vers PUT, PATCH ou DELETE.
    La méthode d'origine reste dans environ['farmstand.original_method'].
    """

    def __init__(self, wsgi_app, param='_method', header='X-HTTP-Method-Override'):
        self.wsgi_app = wsgi_app
        self.param = param
        self.header = header

    def __call__(self, environ, start_response):
        if environ.get('REQUEST_METHOD', '').upper() == 'POST':
            method = self.requested_method(environ)
            if method in ALLOWED_METHODS:
                environ['farmstand.original_method'] = environ['REQUEST_METHOD']
                environ['REQUEST_METHOD'] = method
        return self.wsgi_app(environ, start_response)

    def requested_method(self, environ):
        # On ne lit jamais le corps : seuls la query string et les en-têtes comptent
        request = Request(environ)
        method = request.args.get(self.param) or request.headers.get(self.header)
        if not method:
            return None
        return method.strip().upper()
