from .auth_transport import BasicAuthTransport, BearerAuthTransport

__all__ = ['BasicAuthTransport', 'BearerAuthTransport']
