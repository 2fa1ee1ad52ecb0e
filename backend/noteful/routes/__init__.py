# Routes package init
"""
Noteful Backend — API Routes Package
=====================================

Route Inventory (all under /api):
    - folders.py:  GET/POST /folders, GET/PUT/DELETE /folders/{id}
    - tags.py:     GET/POST /tags,    GET/PUT/DELETE /tags/{id}
    - notes.py:    GET/POST /notes,   GET/PUT/DELETE /notes/{id}
    - health.py:   GET /health

Routes are thin: they pull data out of the request, call one service method
and set status codes and headers. Path ids are taken as plain strings so the
services can answer malformed ids with 400 "The `id` is not valid".
"""
