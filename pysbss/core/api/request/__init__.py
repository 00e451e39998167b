"""Request building, sending and response decoding."""
from .form_encoder import FormEncoder
from .request_builder import RequestBuilder
from .request_handler import RequestHandler
from .response_decoder import ResponseDecoder

__all__ = [
    'FormEncoder',
    'RequestBuilder',
    'RequestHandler',
    'ResponseDecoder',
]
