# This file marks the services package.
# Each service owns the SQL for one resource and returns plain dictionaries to the routers.
