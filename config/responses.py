"""
Uniform ``{success, data, error}`` envelope for the tracking and trending
endpoints polled by the admin dashboard.
"""

from rest_framework import status as http_status
from rest_framework.response import Response
from rest_framework.views import exception_handler


def success_response(data=None, *, message=None, status=http_status.HTTP_200_OK):
    body = {'success': True}
    if data is not None:
        body['data'] = data
    if message is not None:
        body['message'] = message
    return Response(body, status=status)


def error_response(error, *, status=http_status.HTTP_400_BAD_REQUEST):
    # Serializer errors stay structured; exceptions become their message.
    if not isinstance(error, (dict, list)):
        error = str(error)
    return Response({'success': False, 'error': error}, status=status)


# Views whose DRF errors (auth, permission, parse) use the envelope too
ENVELOPED_VIEW_MODULES = ('apps.tracking.views', 'apps.trending.views')


def envelope_exception_handler(exc, context):
    response = exception_handler(exc, context)
    view = context.get('view')
    if response is None or getattr(view, '__module__', None) not in ENVELOPED_VIEW_MODULES:
        return response

    data = response.data
    if isinstance(data, dict) and set(data) == {'detail'}:
        data = data['detail']
    response.data = {'success': False, 'error': data if isinstance(data, (dict, list)) else str(data)}
    return response
