'''
Dormitory laundry reservation frontend server.

The `/api` routes proxy the remote backend; `core` holds the client-side
logic (Jalali calendar, slot wizard, status styles, listing helpers).
'''
__version__ = "0.1.0"
