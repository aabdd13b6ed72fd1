"""
Endpoint metadata for the Member Entitlement Management area.

Paths are relative to ``<endpoint>/<organization>/_apis/``. Placeholders
are substituted with the operation's path parameters.
"""

DEFAULT_ENDPOINT = "https://vsaex.dev.azure.com"
API_VERSION = "7.1-preview"

GROUP_ENTITLEMENTS_ENDPOINT = "groupentitlements"
GROUP_ENTITLEMENT_ENDPOINT = "groupentitlements/{group_id}"
GROUP_MEMBERS_ENDPOINT = "GroupEntitlements/{group_id}/members"
GROUP_MEMBER_ENDPOINT = "GroupEntitlements/{group_id}/members/{member_id}"
USER_ENTITLEMENTS_ENDPOINT = "userentitlements"
USER_ENTITLEMENT_ENDPOINT = "userentitlements/{user_id}"
USER_ENTITLEMENT_SUMMARY_ENDPOINT = "userentitlementsummary"

JSON_CONTENT_TYPE = "application/json"
JSON_PATCH_CONTENT_TYPE = "application/json-patch+json"
