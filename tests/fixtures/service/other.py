"""Types that are not services."""


class OtherType:
    def Get(self: OtherType, request):
        return request


class MyServiceImpl:
    pass
