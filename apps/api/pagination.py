from rest_framework.pagination import PageNumberPagination
from decouple import config


class StandardPageNumberPagination(PageNumberPagination):
    """
    Page-number pagination returning the ApiResponse envelope

    Usage:
        class YourView(APIView):
            def get(self, request):
                paginator = StandardPageNumberPagination()
                page = paginator.paginate_queryset(queryset, request, view=self)
                return paginator.get_paginated_response(Serializer(page, many=True).data)
    """
    page_size = config('STANDARD_PAGINATION_PAGE_SIZE', default=20, cast=int)
    page_size_query_param = 'page_size'
    max_page_size = config('STANDARD_PAGINATION_MAX_PAGE_SIZE', default=100, cast=int)

    def get_pagination_info(self):
        return {
            'count': self.page.paginator.count,
            'next': self.get_next_link(),
            'previous': self.get_previous_link(),
            'current_page': self.page.number,
            'total_pages': self.page.paginator.num_pages,
            'page_size': self.get_page_size(self.request),
            'has_next': self.page.has_next(),
            'has_previous': self.page.has_previous(),
        }

    def get_paginated_response(self, data):
        from apps.api.response import ApiResponse
        return ApiResponse.paginated(data, self.get_pagination_info())

    def get_paginated_response_schema(self, schema):
        return {
            'type': 'object',
            'properties': {
                'success': {'type': 'boolean'},
                'message': {'type': 'string'},
                'data': schema,
                'pagination': {'type': 'object'},
                'error': {'type': 'object', 'nullable': True},
            },
        }
