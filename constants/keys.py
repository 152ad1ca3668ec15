class UIKeys:
    """Keys for UI widgets in ``st.session_state``."""

    LANG_SELECT = "ui.lang_select"
    KEY_INPUT = "ui.settings.key"
    CATEGORY_SELECT = "ui.settings.category"
    VALUE_TYPE_SELECT = "ui.settings.value_type"
    DESCRIPTION_INPUT = "ui.settings.description"
    SORT_ORDER_INPUT = "ui.settings.sort_order"
    IS_SYSTEM_CHECKBOX = "ui.settings.is_system"
    IS_ENCRYPTED_CHECKBOX = "ui.settings.is_encrypted"
    # Value widgets are keyed per value type, see ``value_widget_key``.
    VALUE_PREFIX = "ui.settings.value"


class StateKeys:
    """Keys for data stored in ``st.session_state``."""

    FORM_CONTROLLER = "settings_form.controller"
    FIELD_FEEDBACK = "settings_form.feedback"
    SUBMITTED_RECORDS = "settings_form.submitted"
    LANG = "lang"


class FieldNames:
    """Logical field names of the settings draft."""

    KEY = "key"
    CATEGORY = "category"
    VALUE_TYPE = "valueType"
    VALUE = "value"
    DESCRIPTION = "description"
    SORT_ORDER = "sortOrder"
    IS_SYSTEM = "isSystem"
    IS_ENCRYPTED = "isEncrypted"

    ALL: tuple[str, ...] = (
        KEY,
        CATEGORY,
        VALUE_TYPE,
        VALUE,
        DESCRIPTION,
        SORT_ORDER,
        IS_SYSTEM,
        IS_ENCRYPTED,
    )


def value_widget_key(value_type: str, suffix: str | None = None) -> str:
    """Return the widget key for the value control of ``value_type``."""

    base = f"{UIKeys.VALUE_PREFIX}.{value_type.lower()}"
    return f"{base}.{suffix}" if suffix else base
