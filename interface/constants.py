"""Interface-level constants for the todo CLI/HTTP adapters."""

PROGRAM_NAME = "todo"
PROGRAM_DESCRIPTION = "A simple TODO CLI application"
FALLBACK_VERSION = "1.0.0"

LANG_PACK = {
    "en": {
        "ADDED": "Added: {todo}",
        "COMPLETED": "Completed: {todo}",
        "UNCOMPLETED": "Uncompleted: {todo}",
        "DELETED": "Deleted: {todo}",
        "CLEARED": "Cleared {count} completed todo(s).",
        "NOT_FOUND": "Todo with id {id} not found.",
        "LIST_EMPTY": "No todos found.",
        "LIST_HEADER": "TODO List:",
        "LIST_SUMMARY": "{count} todo(s)",
        "STORE_ERROR": "Error: {error}",
        "SERVER_RUNNING": "Server running at http://{host}:{port}",
        "HELP_ADD": "Add a new todo",
        "HELP_LIST": "List all todos",
        "HELP_ALL": "Show all todos including completed",
        "HELP_PENDING": "Show only pending todos",
        "HELP_DONE": "Mark a todo as completed",
        "HELP_UNDONE": "Mark a todo as not completed",
        "HELP_DELETE": "Delete a todo",
        "HELP_CLEAR": "Remove all completed todos",
        "HELP_SERVE": "Start the REST API server",
    },
    "ru": {
        "ADDED": "Добавлено: {todo}",
        "COMPLETED": "Выполнено: {todo}",
        "UNCOMPLETED": "Снова в работе: {todo}",
        "DELETED": "Удалено: {todo}",
        "CLEARED": "Удалено выполненных задач: {count}.",
        "NOT_FOUND": "Задача с id {id} не найдена.",
        "LIST_EMPTY": "Задач нет.",
        "LIST_HEADER": "Список задач:",
        "LIST_SUMMARY": "Задач: {count}",
        "STORE_ERROR": "Ошибка: {error}",
        "SERVER_RUNNING": "Сервер запущен: http://{host}:{port}",
        "HELP_ADD": "Добавить задачу",
        "HELP_LIST": "Список задач",
        "HELP_DONE": "Отметить задачу выполненной",
        "HELP_UNDONE": "Снять отметку о выполнении",
        "HELP_DELETE": "Удалить задачу",
        "HELP_CLEAR": "Удалить все выполненные задачи",
    },
}
