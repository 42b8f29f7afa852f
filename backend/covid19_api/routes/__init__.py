# Routes package init
"""
COVID-19 India API — API Routes Package
=========================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - states.py:     GET    /states/                     (all states)
                     GET    /states/{state_id}           (one state)
                     GET    /states/{state_id}/stats     (case totals)
    - districts.py:  POST   /districts                   (add district)
                     GET    /districts/{district_id}     (one district)
                     PUT    /districts/{district_id}     (replace district)
                     DELETE /districts/{district_id}     (remove district)
                     GET    /districts/{district_id}/details (state name)
    - health.py:     GET    /health                      (service health check)

Design Principle:
    Routes are THIN: extract parameters, call one service method, shape
    the response. Every route answers 200 on success, including lookups
    that match nothing (empty object) and writes that touch zero rows.
"""
