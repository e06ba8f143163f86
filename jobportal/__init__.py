"""Realtime notification service for the job portal.

The package is split the same way on the server and on the client side:
``domain`` holds plain entities, ``infrastructure`` persistence and the
websocket rooms, ``application`` the use cases, ``interfaces`` the HTTP
surface and ``client`` the consumer side of the notification flow.
"""
