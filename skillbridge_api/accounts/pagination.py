from core.pagination import StandardResultsPagination


class UserListPagination(StandardResultsPagination):
    page_size = 15
    max_page_size = 50
