"""Static metadata describing the exam console."""

APP_NAME = "Exam Console"
APP_VERSION = "0.1"
