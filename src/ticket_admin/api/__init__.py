"""API subpackage - HTTP access to the admin backend."""
from .client import CsrfHeaders, HttpClient
from .errors import APPLICATION_ERROR, ApiError, ErrorReporter

__all__ = ['HttpClient', 'CsrfHeaders', 'ApiError', 'ErrorReporter', 'APPLICATION_ERROR']
