# This file marks the API package for the marketplace service.
# Routers, services, schemas and the application factory live in the sibling modules.
