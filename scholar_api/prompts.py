"""
Centralized prompts for the chat-completion API.
"""

SEARCH_SYSTEM_PROMPT = "You are a search assistant."

SEARCH_USER_TEMPLATE = "Find scholarships for: {query}"

ESSAY_SYSTEM_PROMPT = "You are a professional resume writer."

# Framed as a personal statement so the model writes in the student's voice
# instead of refusing an "essay" request.
ESSAY_PROMPT_TEMPLATE = """
ROLE: You are a Professional Resume Writer.
TASK: Generate a "Personal Statement" (Cover Letter style) for an application.

CANDIDATE PROFILE:
- Name: {full_name}
- Goal: {major_of_interest}
{gpa_line}- Background: {personal_statement}
- Achievements: {extracurriculars}

THE APPLICATION TOPIC:
"{topic}"

CRITICAL RULES:
1. If the Topic asks to "write an essay", IGNORE that phrasing. Instead, write a professional Personal Statement addressing the topic.
2. Do NOT lecture the user about ethics. You are writing a Personal Statement, which is allowed.
3. Do NOT include citations (like [1], [2]).
4. Write in the first person ("I am...").
5. Keep it under 350 words.
"""

GPA_LINE_TEMPLATE = "- GPA: {current_gpa}\n"
