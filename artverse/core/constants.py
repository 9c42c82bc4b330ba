# ==============================================================================
# APPLICATION CONSTANTS - Centralized Configuration Values
# ==============================================================================
# Immutable constants used throughout the application
# Organized by category for easy maintenance
# ==============================================================================

from __future__ import annotations

from typing import Dict, Final, Tuple


# ==============================================================================
# API CONSTANTS
# ==============================================================================

class APIConstants:
    """API-related constants."""

    # Pagination defaults
    DEFAULT_PAGE_SIZE: Final[int] = 20
    MAX_PAGE_SIZE: Final[int] = 100
    ORDERS_PAGE_SIZE: Final[int] = 50

    # Response headers
    REQUEST_ID_HEADER: Final[str] = "X-Request-ID"
    RESPONSE_TIME_HEADER: Final[str] = "X-Response-Time"


# ==============================================================================
# DATABASE CONSTANTS
# ==============================================================================

class DatabaseConstants:
    """Collection names."""

    USERS_COLLECTION: Final[str] = "users"
    ARTWORKS_COLLECTION: Final[str] = "artworks"
    COURSES_COLLECTION: Final[str] = "courses"
    CARTS_COLLECTION: Final[str] = "carts"
    WISHLISTS_COLLECTION: Final[str] = "wishlists"
    COMMISSIONS_COLLECTION: Final[str] = "commissions"
    ORDERS_COLLECTION: Final[str] = "orders"
    NOTIFICATIONS_COLLECTION: Final[str] = "notifications"
    CONTACTS_COLLECTION: Final[str] = "contacts"

    DEFAULT_QUERY_LIMIT: Final[int] = 1000


# ==============================================================================
# CATALOG CONSTANTS
# ==============================================================================

class CatalogConstants:
    """Sorting and display rules for artwork and course listings."""

    DEFAULT_SORT: Final[str] = "newest"

    # sort key -> (field, direction)
    ARTWORK_SORTS: Final[Dict[str, Tuple[str, str]]] = {
        "newest": ("created_at", "desc"),
        "oldest": ("created_at", "asc"),
        "price-high": ("price", "desc"),
        "price-low": ("price", "asc"),
        "popular": ("stats.views", "desc"),
        "likes": ("stats.likes", "desc"),
        "title-asc": ("title", "asc"),
        "title-desc": ("title", "desc"),
    }

    COURSE_SORTS: Final[Dict[str, Tuple[str, str]]] = {
        "newest": ("created_at", "desc"),
        "oldest": ("created_at", "asc"),
        "price-high": ("price", "desc"),
        "price-low": ("price", "asc"),
        "popular": ("student_count", "desc"),
        "rating": ("average_rating", "desc"),
        "title-asc": ("title", "asc"),
        "title-desc": ("title", "desc"),
    }

    # Course prices are stored in minor units
    CENTS_PER_UNIT: Final[int] = 100

    DEFAULT_AVATAR: Final[str] = "/default-avatar.png"


# ==============================================================================
# DASHBOARD CONSTANTS
# ==============================================================================

class DashboardConstants:
    """Artist dashboard limits."""

    RECENT_ORDERS_LIMIT: Final[int] = 10
    POPULAR_ARTWORKS_LIMIT: Final[int] = 5
    MONTH_LABELS: Final[Tuple[str, ...]] = (
        "Jan", "Feb", "Mar", "Apr", "May", "Jun",
        "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
    )


# ==============================================================================
# ERROR MESSAGES
# ==============================================================================

class ErrorMessages:
    """Standardized error messages."""

    # Authentication
    INVALID_CREDENTIALS: Final[str] = "Invalid email or password"
    UNAUTHORIZED: Final[str] = "Authentication required"
    USER_GONE: Final[str] = "User no longer exists"
    ACCOUNT_DISABLED: Final[str] = "Account is disabled"

    # Authorization
    PERMISSION_DENIED: Final[str] = "You don't have permission to perform this action"
    ARTWORK_NOT_PUBLIC: Final[str] = "This artwork is not publicly available"
    NOT_ARTWORK_OWNER: Final[str] = "You can only modify your own artworks"
    NOT_COURSE_OWNER: Final[str] = "You can only modify your own courses"
    NOT_COMMISSION_PARTICIPANT: Final[str] = "You are not part of this commission"

    # Resources
    USER_EXISTS: Final[str] = "User already exists"
    USER_NOT_FOUND: Final[str] = "User not found"
    ARTIST_NOT_FOUND: Final[str] = "Artist not found"
    ARTWORK_NOT_FOUND: Final[str] = "Artwork not found"
    COURSE_NOT_FOUND: Final[str] = "Course not found"
    COURSE_NOT_AVAILABLE: Final[str] = "Course not found or not approved"
    ITEM_NOT_FOUND: Final[str] = "Item not found"
    CART_ITEM_NOT_FOUND: Final[str] = "Item not found in cart"
    COMMISSION_NOT_FOUND: Final[str] = "Commission not found"
    ORDER_NOT_FOUND: Final[str] = "Order not found"

    # Availability
    ARTWORK_UNAVAILABLE: Final[str] = "Artwork is not available (not approved)"
    COURSE_UNAVAILABLE: Final[str] = "Course is not available (not published or approved)"
    WISHLIST_DUPLICATE: Final[str] = "Item already in wishlist"
    ALREADY_ENROLLED: Final[str] = "Already enrolled in this course"

    # Validation
    NO_STATUS_FIELDS: Final[str] = "Provide status or payout_status"
    DUPLICATE_ORDER_LINE: Final[str] = "Each item can appear only once per order"
    PUBLISH_WITHOUT_LESSONS: Final[str] = "Course must have at least one lesson to publish"
    APPROVE_UNPUBLISHED: Final[str] = "Only published courses can be approved"
    REJECTION_REASON_REQUIRED: Final[str] = "Rejection reason is required"
    ARTWORK_SOLD: Final[str] = "Sold artworks can no longer be changed"

    # Workflow
    ORDER_EXISTS: Final[str] = "An order already exists for this payment"
    COMMISSION_STATUS_NOT_ALLOWED: Final[str] = "Invalid status"
    COMMISSION_TRANSITION_INVALID: Final[str] = "Cannot move commission from {current} to {target}"
    COMMISSION_CHANGED: Final[str] = "Commission status changed concurrently, retry"


# ==============================================================================
# SUCCESS MESSAGES
# ==============================================================================

class SuccessMessages:
    """Standardized success messages."""

    USER_CREATED: Final[str] = "User registered successfully"
    LOGIN_SUCCESS: Final[str] = "Login successful"
    LOGOUT_SUCCESS: Final[str] = "Logged out successfully"
    PROFILE_UPDATED: Final[str] = "Profile updated successfully"
    ACCOUNT_DEACTIVATED: Final[str] = "Account deactivated successfully"

    ARTWORK_CREATED: Final[str] = "Artwork submitted for review"
    ARTWORK_UPDATED: Final[str] = "Artwork updated and resubmitted for review"
    ARTWORK_DELETED: Final[str] = "Artwork deleted successfully"
    ARTWORK_APPROVED: Final[str] = "Artwork approved"
    ARTWORK_REJECTED: Final[str] = "Artwork rejected"

    COURSE_CREATED: Final[str] = "Course created successfully"
    COURSE_UPDATED: Final[str] = "Course updated successfully"
    LESSON_ADDED: Final[str] = "Lesson added successfully"
    COURSE_PUBLISHED: Final[str] = "Course published and sent for approval"
    COURSE_APPROVED: Final[str] = "Course approved"
    COURSE_REJECTED: Final[str] = "Course rejected"
    ENROLLED: Final[str] = "Enrolled successfully"

    CART_ITEM_ADDED: Final[str] = "Item added to cart"
    CART_ITEM_UPDATED: Final[str] = "Cart item updated"
    CART_ITEM_REMOVED: Final[str] = "Item removed from cart"
    CART_CLEARED: Final[str] = "Cart cleared"
    WISHLIST_ITEM_ADDED: Final[str] = "Item added to wishlist"
    WISHLIST_ITEM_REMOVED: Final[str] = "Item removed from wishlist"
    WISHLIST_CLEARED: Final[str] = "Wishlist cleared"

    COMMISSION_CREATED: Final[str] = "Commission request sent"
    MESSAGE_SENT: Final[str] = "Message sent"
    COMMISSION_UPDATED: Final[str] = "Commission status updated"

    ORDER_CREATED: Final[str] = "Order placed successfully"
    ORDER_UPDATED: Final[str] = "Order updated successfully"

    CONTACT_SUBMITTED: Final[str] = "Contact form submitted successfully"
