from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field

from ado_entitlements_types.base import WireModel


class AccountLicenseType(str, Enum):
    none = "none"
    early_adopter = "earlyAdopter"
    express = "express"
    professional = "professional"
    advanced = "advanced"
    stakeholder = "stakeholder"


class AccountUserStatus(str, Enum):
    none = "none"
    active = "active"
    disabled = "disabled"
    deleted = "deleted"
    pending = "pending"
    expired = "expired"
    pending_disabled = "pendingDisabled"


class AssignmentSource(str, Enum):
    none = "none"
    unknown = "unknown"
    group_rule = "groupRule"


class GitHubLicenseType(str, Enum):
    none = "none"
    enterprise = "enterprise"


class LicensingSource(str, Enum):
    none = "none"
    account = "account"
    msdn = "msdn"
    profile = "profile"
    auto = "auto"
    trial = "trial"


class MsdnLicenseType(str, Enum):
    none = "none"
    eligible = "eligible"
    professional = "professional"
    platforms = "platforms"
    test_professional = "testProfessional"
    premium = "premium"
    ultimate = "ultimate"
    enterprise = "enterprise"


class AccessLevel(WireModel):
    """License assigned to a user or granted by a group rule."""

    account_license_type: Optional[AccountLicenseType] = Field(None, description="Type of account license")
    assignment_source: Optional[AssignmentSource] = Field(None, description="Where the assignment came from")
    license_display_name: Optional[str] = Field(None, description="Display name of the license")
    licensing_source: Optional[LicensingSource] = Field(None, description="Licensing source")
    msdn_license_type: Optional[MsdnLicenseType] = Field(None, description="Visual Studio subscription type")
    git_hub_license_type: Optional[GitHubLicenseType] = Field(None, description="GitHub license type")
    status: Optional[AccountUserStatus] = Field(None, description="User status in the account")
    status_message: Optional[str] = Field(None, description="Status message")


class Extension(WireModel):
    """An extension assigned to a user or granted by a group rule."""

    id: Optional[str] = Field(None, description="Gallery id of the extension")
    name: Optional[str] = Field(None, description="Friendly name of the extension")
    assignment_source: Optional[AssignmentSource] = Field(None, description="Where the assignment came from")
    source: Optional[LicensingSource] = Field(None, description="Licensing source")


class GroupExtensionRule(Extension):
    pass


class LicenseSummaryData(WireModel):
    account_license_type: Optional[AccountLicenseType] = None
    assigned: Optional[int] = None
    available: Optional[int] = None
    included_quantity: Optional[int] = None
    is_purchasable: Optional[bool] = None
    license_name: Optional[str] = None
    licensing_source: Optional[LicensingSource] = None
    msdn_license_type: Optional[MsdnLicenseType] = None
    git_hub_license_type: Optional[GitHubLicenseType] = None
    next_billing_date: Optional[datetime] = None
    source: Optional[LicensingSource] = None
    total: Optional[int] = None
    disabled: Optional[int] = None


class ExtensionSummaryData(WireModel):
    assigned: Optional[int] = None
    available: Optional[int] = None
    included_quantity: Optional[int] = None
    total: Optional[int] = None
    assigned_through_subscription: Optional[int] = None
    extension_id: Optional[str] = None
    extension_name: Optional[str] = None
    is_trial_version: Optional[bool] = None
    minimum_license_required: Optional[str] = None
    remaining_trial_days: Optional[int] = None
    trial_expiry_date: Optional[datetime] = None
