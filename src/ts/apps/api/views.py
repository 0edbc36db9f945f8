from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView


class TsApiView( APIView ):
    """
    Base class for Trip Share API views.

    Wraps successful response data in a consistent envelope: {"data": ...}
    This provides flexibility to add metadata fields later without breaking clients.

    Only 2xx responses are wrapped. Error responses pass through unchanged.
    """

    def finalize_response(
        self,
        request: Request,
        response: Response,
        *args,
        **kwargs
    ) -> Response:
        """Wrap successful response data in {"data": ...} envelope."""
        response = super().finalize_response( request, response, *args, **kwargs )

        if getattr( response, 'data', None ) is not None and 200 <= response.status_code < 300:
            response.data = {
                'data': response.data,
            }

        return response
