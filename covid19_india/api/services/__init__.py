# This file marks the services package for API data-access modules.
# It exists so routers can depend on cohesive service classes instead of raw SQL.
# Service modules isolate query text from transport concerns.
