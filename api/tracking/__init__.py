"""
Shipment tracking records: public lookup and admin CRUD.
"""
