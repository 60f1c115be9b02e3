from __future__ import annotations

from careerforge.core.utils import join_list
from careerforge.models.schemas import CoverLetterRequest


def _field(value) -> str:
    return "" if value is None else str(value)


def cover_letter_prompt(user, data: CoverLetterRequest) -> str:
    return f"""
Write a professional cover letter for a {data.job_title} position at {data.company_name}.

About the candidate:
- Industry: {_field(user.industry)}
- Years of Experience: {_field(user.experience)}
- Skills: {join_list(user.skills)}
- Professional Background: {_field(user.bio)}

Job Description:
{data.job_description}

Requirements:
1. Use a professional, enthusiastic tone
2. Highlight relevant skills and experience
3. Show understanding of the company's needs
4. Keep it concise (max 400 words)
5. Use proper business letter formatting in markdown
6. Include specific examples of achievements
7. Relate candidate's background to job requirements

Format the letter in markdown.
"""


def insights_prompt(industry: str) -> str:
    return f"""
Analyze the current state of the {industry} industry and provide insights in ONLY the following JSON format without any additional notes or explanations:
{{
  "salaryRanges": [
    {{ "role": "string", "min": number, "max": number, "median": number, "location": "string" }}
  ],
  "growthRate": number,
  "demandLevel": "High" | "Medium" | "Low",
  "topSkills": ["skill1", "skill2"],
  "marketOutlook": "Positive" | "Neutral" | "Negative",
  "keyTrends": ["trend1", "trend2"],
  "recommendedSkills": ["skill1", "skill2"]
}}

IMPORTANT: Return ONLY the JSON. No additional text, notes, or markdown formatting.
Include at least 5 common roles for salary ranges.
Growth rate should be a percentage.
Include at least 5 skills and trends.
"""


def quiz_prompt(user) -> str:
    skills = join_list(user.skills)
    expertise = f" with expertise in {skills}" if skills else ""
    return f"""
Generate 10 technical interview questions for a {_field(user.industry)} professional{expertise}.

Each question should be multiple choice with 4 options.

Return the response in this JSON format only, no additional text:
{{
  "questions": [
    {{
      "question": "string",
      "options": ["string", "string", "string", "string"],
      "correctAnswer": "string",
      "explanation": "string"
    }}
  ]
}}
"""


def improvement_prompt(industry: str, wrong_answers_text: str) -> str:
    return f"""
The user got the following {_field(industry)} technical interview questions wrong:

{wrong_answers_text}

Based on these mistakes, provide a concise, specific improvement tip.
Focus on the knowledge gaps revealed by these wrong answers.
Keep the response under 2 sentences and make it encouraging.
Don't explicitly mention the mistakes, instead focus on what to learn/practice.
"""
