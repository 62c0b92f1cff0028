from .client_response import Response, ServerErrorBody, check_response, decode_response

__all__ = ['Response', 'ServerErrorBody', 'check_response', 'decode_response']
