"""
Admin Module

System initialization and admin authorization. An admin is authorized by
the mere presence of its AdminCap record in the admins table.
"""
