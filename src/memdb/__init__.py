"""
memdb - In-process table store

A small in-memory database driven by a four-statement command language
(create table, insert into, select, delete from) with a deferred
execution facade.
"""

__version__ = "0.1.0"
