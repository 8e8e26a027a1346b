"""Console prompts and feedback texts used across the authoring and exam flows."""

EXAM_TYPE_PROMPT: str = "Enter Exam Type (1- Final, 2- Practical): "
EXAM_TIME_PROMPT: str = "Enter Exam Time (minutes): "
QUESTION_COUNT_PROMPT: str = "Enter Number of Questions: "
QUESTION_HEADER_TEMPLATE: str = "\nQuestion {number}:"
QUESTION_TYPE_PROMPT: str = "Enter Question Type (1- TF, 2- MCQ): "
FORCED_MCQ_NOTICE: str = "MCQ Questions: "
QUESTION_BODY_PROMPT: str = "Enter Question Body: "
QUESTION_MARK_PROMPT: str = "Enter Question Mark: "
CHOICE_COUNT_PROMPT: str = "Enter number of answer choices ({minimum}-{maximum}): "
ANSWER_TEXT_PROMPT_TEMPLATE: str = "Enter Answer {number}: "
TF_CORRECT_PROMPT: str = "Enter Correct Answer (1 for True, 2 for False): "
MCQ_CORRECT_PROMPT: str = "Enter Correct Answer Number: "

START_EXAM_PROMPT: str = "Start Exam? (y/n): "
ANSWER_PROMPT: str = "Your Answer: "

INVALID_INPUT_MESSAGE: str = "Invalid input. Please try again."
EMPTY_INPUT_MESSAGE: str = "Input cannot be empty."

EXAM_STARTED_TEMPLATE: str = "Exam started at: {started_at:%H:%M:%S}"
EXAM_DURATION_TEMPLATE: str = "Duration: {minutes:g} minutes"
EXAM_END_TEMPLATE: str = "End time: {ends_at:%H:%M:%S}\n"
TIME_UP_MESSAGE: str = "\nTime's up! Exam terminated."
CORRECT_FEEDBACK: str = "Correct!"
WRONG_FEEDBACK_TEMPLATE: str = "Wrong. Correct answer: {answer_id}"
