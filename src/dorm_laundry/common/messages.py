'''
User-facing (Persian) messages shared by the proxy routes and client helpers.
'''

# --- Session / token ---
TOKEN_NOT_FOUND = "توکن یافت نشد"
TOKEN_VERIFY_FAILED = "خطا در تأیید توکن"
SERVER_ERROR = "خطای سرور"
INVALID_REQUEST = "اطلاعات ارسالی نامعتبر است"

# --- Auth ---
INVALID_ACTION = "عملیات نامعتبر"
OPERATION_FAILED = "خطا در عملیات"
PHONE_REQUIRED = "شماره تلفن الزامی است"
PHONE_AND_CODE_REQUIRED = "شماره تلفن و کد تأیید الزامی هستند"
SEND_CODE_FAILED = "خطا در ارسال کد تأیید"
CHECK_CODE_FAILED = "بررسی کد با خطا مواجه شد"
LOGIN_FAILED = "ورود با خطا مواجه شد"
REGISTER_DATA_MISSING = "خطا در دریافت اطلاعات کاربر"
REGISTER_FAILED = "ثبت نام با خطا مواجه شد"
LOGOUT_SUCCESS = "خروج با موفقیت انجام شد"

# --- Profile ---
PROFILE_DATA_MISSING = "خطا در دریافت اطلاعات پروفایل"
PROFILE_EDIT_FAILED = "ویرایش پروفایل با خطا مواجه شد"

# --- Time slots ---
SLOTS_DATA_MISSING = "خطا در دریافت اطلاعات نوبت ها"
SLOTS_CREATE_FAILED = "ثبت نوبت ها با خطا مواجه شد"
SLOTS_FETCH_FAILED = "دریافت نوبت ها با خطا مواجه شد"
SLOT_DATA_MISSING = "خطا در دریافت اطلاعات نوبت"
SLOT_EDIT_FAILED = "ویرایش نوبت با خطا مواجه شد"
SLOT_DELETE_FAILED = "حذف نوبت با خطا مواجه شد"
TIME_REQUIRED = "زمان شروع و پایان را وارد کنید"
END_AFTER_START = "زمان پایان باید بعد از زمان شروع باشد"
MIN_SLOT_DURATION = "مدت هر نوبت باید حداقل ۳۰ دقیقه باشد"
CAPACITY_OUT_OF_RANGE = "ظرفیت وارد شده مجاز نیست"
NO_WEEKDAY_SELECTED = "حداقل یک روز هفته را انتخاب کنید"
DATE_RANGE_REQUIRED = "بازه تاریخ را مشخص کنید"
DATE_RANGE_INVALID = "تاریخ پایان باید بعد از تاریخ شروع باشد"
NO_DATE_SELECTED = "لطفاً یک تاریخ انتخاب کنید"
NO_ACTIVE_SLOT = "حداقل یک نوبت فعال لازم است"

# --- Reservations ---
RECENT_FETCH_FAILED = "دریافت رزروهای اخیر با خطا مواجه شد"
SLOT_ID_MISSING = "لطفاً یک نوبت را انتخاب کنید"
RESERVE_FAILED = "خطا در رزرو نوبت"
RESERVATION_ID_MISSING = "شناسه رزرو الزامی است"
CANCEL_FAILED = "خطا در لغو رزرو"
CANCEL_NOT_ALLOWED = "فقط رزروهای در انتظار قابل لغو هستند"
INVALID_STATUS = "وضعیت انتخاب شده نامعتبر است"
MANAGE_FAILED = "خطا در تغییر وضعیت رزرو"

# --- Calendar ---
INVALID_DATE = "تاریخ نامعتبر است"
NO_SLOTS_FOR_DATE = "برای تاریخ انتخاب شده نوبتی وجود ندارد"
