"""
Due Reminders MCP Tool
Delivers reminders whose due time has passed
"""
from ..server import mcp
from ...dependencies import get_task_service
from ...services.reminder_service import ReminderService


@mcp.tool()
def due_reminders() -> dict:
    """Return and clear every pending reminder that is due now."""
    reminders = get_task_service().reminders
    if not isinstance(reminders, ReminderService):
        return {"error": "unsupported", "message": "Reminders are delivered by an external scheduler"}

    due = reminders.pop_due()
    return {
        "reminders": [
            {
                "task_id": reminder.task_id,
                "title": reminder.title,
                "body": reminder.body,
                "fire_at": reminder.fire_at.isoformat(),
            }
            for reminder in due
        ],
        "total": len(due),
    }
