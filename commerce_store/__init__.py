"""
commerce-store - in-memory customer/product/order repository
"""
__version__ = "1.0.0"
