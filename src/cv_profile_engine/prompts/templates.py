"""Prompt body templates, one per prompt kind."""

from __future__ import annotations

PERSONAL_INFO = """\
Here is the personal information extracted from the CV:

**Contact details:**
- Name: {name}
- Email: {email}
- Phone: {phone}

**Personal section of the CV:**
{raw_personal_section}

Can you present this information in a clear and professional way?"""

TECHNICAL_SKILLS = """\
Here are the technical skills identified in the CV:

**Automatically identified technologies:**
{skills}

**Extracted technical sections:**
{sections}

**Statistics:**
- Number of identified technologies: {skills_count}

Can you organize and present these skills by category (languages, frameworks, tools, etc.)?"""

EXPERIENCE = """\
Here is the analysis of the professional experience:

**Detected experience periods:**
{periods}

**Computed years of experience:** {years} years

Can you analyze and present the career progression in a structured way?"""

FULL_PROFILE = """\
Here is all the data extracted from the CV to build a complete profile:

**PERSONAL INFORMATION:**
{personal_info}

**TECHNICAL SKILLS:**
{technical_skills}

**EXPERIENCE:**
{experience}

**EDUCATION:**
{education}

Can you write a complete and compelling professional summary based on this data?"""

COVER_LETTER = """\
Write a personalized cover letter using this information:

**Target role:** {target_role}
**Company:** {target_company}

**Candidate profile:**
- Name: {name}
- Skills: {skills}
- Experience: {years} years

Write a convincing, personalized cover letter."""

COMPATIBILITY_ANALYSIS = """\
Analyze the compatibility between this profile and this job offer:

**JOB OFFER:**
{job_description}

**CANDIDATE PROFILE:**
- Skills: {skills}
- Experience: {years} years
- Education: {education}

Provide a detailed compatibility analysis with a score and recommendations."""
