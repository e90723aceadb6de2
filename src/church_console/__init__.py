"""Church Console package.

Server-rendered admin console for the church membership API. Organized by
feature modules (members, attendance, auth, reports) with a thin Flask
controller layer over services that call the church API.
"""
