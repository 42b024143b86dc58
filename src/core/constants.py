"""Constants shared by the report helpers.

Values mirror what the chat backend sends in report and report action
records, so they must stay byte-for-byte identical to the wire values.
"""

from __future__ import annotations


class ChatType:
    POLICY_ADMINS = "policyAdmins"
    POLICY_ANNOUNCE = "policyAnnounce"
    DOMAIN_ALL = "domainAll"
    POLICY_ROOM = "policyRoom"
    POLICY_EXPENSE_CHAT = "policyExpenseChat"


class ActionType:
    ADDCOMMENT = "ADDCOMMENT"
    CREATED = "CREATED"
    IOU = "IOU"
    RENAMED = "RENAMED"


class StatusNum:
    OPEN = 0
    SUBMITTED = 1
    CLOSED = 2
    APPROVED = 3
    REIMBURSED = 4


class StateNum:
    OPEN = 0
    PROCESSING = 1
    SUBMITTED = 2


DEFAULT_ROOM_TYPES = frozenset(
    {
        ChatType.POLICY_ADMINS,
        ChatType.POLICY_ANNOUNCE,
        ChatType.DOMAIN_ALL,
    }
)

ATTACHMENT_MESSAGE_TEXT = "[Attachment]"

SMS_DOMAIN = "@expensify.sms"

CONCIERGE_EMAIL = "concierge@expensify.com"

# Automated accounts that never represent a real recipient.
EXPENSIFY_EMAILS = frozenset(
    {
        "accounting@expensify.com",
        "admin@expensify.com",
        "chronos@expensify.com",
        CONCIERGE_EMAIL,
        "firstresponders@expensify.com",
        "help@expensify.com",
        "integrationtestingcreds@expensify.com",
        "payroll@expensify.com",
        "receipts@expensify.com",
        "studentambassadors@expensify.com",
        "svfg@expensify.com",
    }
)

LAST_MESSAGE_TEXT_MAX_LENGTH = 200

DEFAULT_TIME_ZONE_NAME = "America/Los_Angeles"

# Store keys.
SESSION_KEY = "session"
PERSONAL_DETAILS_KEY = "personalDetails"
POLICY_COLLECTION = "policy_"
REPORT_COLLECTION = "report_"
REPORT_ACTIONS_COLLECTION = "reportActions_"


class TranslationKey:
    WORKSPACE = "workspace.common.workspace"
    UNAVAILABLE_WORKSPACE = "workspace.common.unavailable"
    ADMIN_ROOM_PART_ONE = "reportActionsView.beginningOfChatHistoryAdminRoomPartOne"
    ADMIN_ROOM_PART_TWO = "reportActionsView.beginningOfChatHistoryAdminRoomPartTwo"
    ANNOUNCE_ROOM_PART_ONE = "reportActionsView.beginningOfChatHistoryAnnounceRoomPartOne"
    ANNOUNCE_ROOM_PART_TWO = "reportActionsView.beginningOfChatHistoryAnnounceRoomPartTwo"
    USER_ROOM_PART_ONE = "reportActionsView.beginningOfChatHistoryUserRoomPartOne"
    USER_ROOM_PART_TWO = "reportActionsView.beginningOfChatHistoryUserRoomPartTwo"
