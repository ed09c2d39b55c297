"""Shared limits and defaults used by request schemas"""
from .enums import SortOrder, Visibility

# Pagination
DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100
DEFAULT_SORT_ORDER = SortOrder.DESC

# Accounts
PASSWORD_MIN_LENGTH = 8

# Feed
DEFAULT_POST_VISIBILITY = Visibility.MEMBER_ONLY
