"""First service: receivers referenced directly and by forward reference."""

from . import auth


class ServiceOne:
    """Serves single items."""

    def Get(self: "ServiceOne", request):
        auth.Check(self, request)
        return request

    def List(self: ServiceOne, request):
        auth.Check(self, request)
        return [request]

    def get(self: ServiceOne, request):
        return request
