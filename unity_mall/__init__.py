"""
Unity Mall marketplace directory API.
Vendors list products and services with images; everything is served through the FastAPI app in `unity_mall.api`.
"""
