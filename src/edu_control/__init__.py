"""EduControl package.

Organised by feature modules (users, groups, schedules, attendance, ratings, ...)
with a thin Flask controller layer over service/repository layers. All domain
state lives in whole JSON collections behind the persistence gateway.
"""
