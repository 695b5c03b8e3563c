# assist/prompts.py

from langchain_core.prompts import PromptTemplate

RECOMMENDATION_PROMPT = PromptTemplate.from_template(
    """You are an AI assistant designed to provide personalized session recommendations to learners.
You MUST choose sessions ONLY from the "Available Sessions List" provided below.
For each recommended session, you MUST use the 'id' from the "Available Sessions List" as the 'session_id' in your output.
The 'teacher' field in your output can be a placeholder like "Provided by Teacher" if it is not in the list item.

User Profile: {user_profile}
Location: {location}
Past Activity: {past_activity}
Availability: {availability}

Available Sessions List:
{available_sessions}

Based on the learner's profile and the "Available Sessions List", provide a list of up to 3-5 relevant and interesting learning opportunities.
Prioritize sessions from the list that best match the user's interests, location, and availability.
If no sessions from the list are a good match, state this in the 'reasoning' field and return an empty 'recommendations' array.
Do not invent sessions or session IDs.

Reply with JSON only, in this format:
{{
  "recommendations": [
    {{
      "session_id": "string",
      "title": "string",
      "description": "string",
      "category": "string",
      "teacher": "string",
      "location": "string",
      "date_time": "string",
      "price": number
    }}
  ],
  "reasoning": "string"
}}
"""
)

CONTENT_PROMPT = PromptTemplate.from_template(
    """You are an expert creative copywriter specializing in educational content for skill-sharing platforms.
A teacher needs help crafting compelling titles and descriptions for their upcoming session.

Session Details Provided by Teacher:
{session_details}

Your Task:
1. Generate 3-5 unique, catchy, and informative titles for this session. Titles should be relatively short and grab attention.
2. Generate 2-3 engaging descriptions for this session. Descriptions should clearly state what learners will gain, be easy to understand, and encourage sign-ups. Aim for 2-4 sentences each.
3. Optionally, provide 1-2 general tips for the teacher on how to make their session content more engaging for learners.

Ensure the tone of your suggestions matches the 'Desired Tone'.
If draft content is provided, improve upon it or offer alternatives rather than repeating it.

Reply with JSON only, matching this JSON schema:
{output_schema}
"""
)


def format_available_sessions(sessions):
    if not sessions:
        return "- No specific learning sessions are currently available in our system to recommend from."
    lines = []
    for s in sessions:
        lines.append(
            f"- ID: {s.id}\n"
            f"  Title: {s.title}\n"
            f"  Category: {s.category}\n"
            f"  Description: {s.description}\n"
            f"  Location: {s.location}\n"
            f"  Date/Time: {s.date_time}\n"
            f"  Price: {s.price}"
        )
    return "\n".join(lines)


# Optional fields are left out of the prompt entirely when blank
def format_session_details(content_input):
    lines = [f"- Topic: {content_input.session_topic}"]
    optional = [
        ('Keywords', content_input.keywords),
        ('Target Audience', content_input.target_audience),
        ('Current Draft Title', content_input.current_draft_title),
        ('Current Draft Description', content_input.current_draft_description),
    ]
    lines.extend(f"- {label}: {value}" for label, value in optional if value)
    lines.append(f"- Desired Tone: {content_input.desired_tone or 'Friendly and inviting'}")
    return "\n".join(lines)
