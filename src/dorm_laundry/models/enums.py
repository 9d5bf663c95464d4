'''
Closed enumerations shared by the API models and the presentation helpers.
'''
import enum

# --- Base Enum Class ---
class ListableEnum(str, enum.Enum):
    """A custom Enum base class that can list all member names."""
    @classmethod
    def get_all_names(cls) -> list[str]:
        return [member.value for member in cls]


class ReservationStatus(ListableEnum):
    PENDING = "pending"
    WASHING = "washing"
    READY = "ready"
    FINISHED = "finished"
    CANCELLED = "cancelled"


class PaymentStatus(ListableEnum):
    PENDING = "pending"
    COMPLETED = "completed"


class Dormitory(ListableEnum):
    DORMITORY_1 = "dormitory-1"
    DORMITORY_2 = "dormitory-2"


class UserRole(ListableEnum):
    USER = "user"
    ADMIN = "admin"
    ADMIN_DORMITORY_1 = "admin-dormitory-1"
    ADMIN_DORMITORY_2 = "admin-dormitory-2"


class DateSelectionMode(ListableEnum):
    WEEKLY = "weekly"
    SPECIFIC = "specific"
