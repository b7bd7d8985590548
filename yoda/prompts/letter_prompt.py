# yoda/prompts/letter_prompt.py
"""
Letter fragments for every sender persona

Placeholders: {name} (recipient display name), {content} (schedule text),
{emotions} (the submitted tags joined with "and").
Fragment sets are keyed by persona kind; the celebrity kind has a separate
set for Trump.
"""


class LetterPrompts:
    """Letter template fragments"""

    TRUMP_KEY = "celebrity-trump"

    SALUTATION = "To {name},"

    ACKNOWLEDGMENT = "Dear {name}, I understand you're preparing for \"{content}\". "

    # Only these tags add a clause; any other tag contributes nothing.
    EMOTION_CLAUSES = {
        "excited": "Your excitement is palpable. ",
        "tense": "It's natural to feel tense before such events. ",
        "hopeful": "I sense hope in your approach. ",
        "anxious": "Feeling anxious only shows how much this matters to you. ",
        "tired": "Be gentle with yourself if you are feeling tired. ",
    }

    # Fixed bodies, used where the letter must be reproducible (demo data).
    BODIES = {
        "future-self": [
            "Looking back from where I am now, I want you to know that this moment was pivotal in our growth. The challenges you're facing today are building the foundation for who I've become.",
            "I wish I could tell my younger self (you) to worry less about perfection and focus more on progress. Each step forward, no matter how small, contributes to the journey.",
            "The anxiety you feel now has transformed into confidence in my present. What seems overwhelming today will become a story of perseverance tomorrow.",
            "Take care of yourself during this busy time. The self-care habits you build now are still serving me well a year later.",
            "I'm proud of you for pushing through difficult moments like these. They've shaped me into someone stronger and more capable than you can currently imagine.",
        ],
        "celebrity": [
            "Remember that every expert was once a beginner. The path to mastery is paved with challenges that shape your character and skills.",
            "I've faced countless obstacles in my career, and each one taught me something valuable. Your current situation is no different. It's another opportunity for growth.",
            "Focus on the process rather than the outcome. Excellence comes from consistent, deliberate effort applied over time.",
            "Trust your preparation and embrace the moment. You have everything you need to succeed already within you.",
            "I look forward to seeing how you rise to this occasion. True champions aren't defined by never falling, but by how they rise after each fall.",
        ],
        TRUMP_KEY: [
            "As I've always said, you have to think big. Every great deal I ever made started with someone who refused to think small, and that's exactly the mindset you need today.",
            "What separates winners from everyone else isn't just talent, it's preparation. I studied every detail before every negotiation. Your presentation deserves the same attention.",
            "Don't focus on the outcome. Focus on your process. If you've prepared thoroughly, the results will follow naturally, believe me.",
            "Success isn't about avoiding pressure. It's about embracing it and using it as fuel. Nobody handles pressure better than people who are ready for it.",
            "I believe in you. Walk in there with confidence, tremendous confidence, and you're going to do a fantastic job.",
        ],
        "mentor": [
            "I've watched your progress with pride, and I know you're ready for this challenge. The skills you've been developing are precisely what's needed now.",
            "Remember our discussion about breaking complex tasks into manageable steps? Apply that same strategy here. Take one segment at a time, and before you know it, you'll have mastered the whole.",
            "It's normal to doubt yourself, but I've seen your capabilities firsthand. You've overcome similar obstacles before, and you'll do so again.",
            "The lessons we've discussed weren't just theoretical. They were preparation for moments exactly like this one.",
            "I believe in your potential, perhaps even more than you do right now. Trust the process we've worked on together, and allow yourself to shine.",
        ],
        "loved-one": [
            "I just wanted to remind you how special you are to me, and how much I believe in you. Your determination has always inspired me.",
            "Remember to take deep breaths when you feel overwhelmed. I've seen you overcome so many challenges with grace and resilience.",
            "No matter what happens, know that I'm here for you, to celebrate your successes and support you through any difficulties.",
            "Your kindness and dedication touch everyone around you, including me. Those qualities will shine through in everything you do.",
            "Take care of yourself during this busy time. You deserve moments of peace and self-compassion amidst all your hard work. I'm sending you love and positive energy.",
        ],
    }

    # Pools for the letter job; one paragraph is drawn uniformly per letter.
    POOLS = {
        "future-self": [
            "Hey {name}, I know you're facing {content} today. Remember how we worried about similar situations before? Those worries never materialized the way we feared. Take a deep breath and trust yourself.",
            "It's your future self here. I want you to know that {content} is just one step in our journey. I've seen how it unfolds, and your strength today builds our resilience for tomorrow.",
            "Looking back at this day, I realize how much {content} shaped who we became. The emotions you feel now, {emotions}, are valid, but they won't define your whole experience.",
        ],
        "celebrity": [
            "As I often said during my career, success is not about avoiding failures but about consistently taking the right approach. With {content} today, focus on your process rather than the outcome.",
            "I see you're facing {content} with {emotions}. In my career I never chased the spectacular moments. I focused on perfecting my approach, day after day. Your consistent effort matters more than any single result.",
            "When I was preparing for important events, I felt many of the emotions you're feeling about {content}. What separated me was not talent, but preparation and persistence. You have what it takes to succeed today.",
        ],
        TRUMP_KEY: [
            "Let me tell you something about {content}: you have to think big. Every great deal I ever made started with someone who refused to think small. Go in there and win.",
            "I've been in high-pressure situations my whole life, and I can tell you that feeling {emotions} before {content} is simply your body getting ready to win. Focus on your preparation, believe me, it works.",
            "Nobody prepares like a winner prepares. Treat {content} like the biggest deal of your life, know every detail, and walk in with tremendous confidence.",
        ],
        "mentor": [
            "I've watched your progress for some time now, and I know you have what it takes to handle {content}. The {emotions} you're feeling are natural, but they don't define your capabilities.",
            "I remember facing challenges similar to {content}. The key is to break it down into smaller steps and focus on one at a time. I believe in your ability to navigate this successfully.",
            "A good mentor doesn't give all the answers but helps you find your own path. As you approach {content} today, trust the skills you've been developing and know that challenges are where true growth happens.",
        ],
        "loved-one": [
            "No matter how {content} turns out today, I want you to know how proud I am of you for trying. Your {emotions} show how much you care, and that's something to be valued.",
            "I know you're feeling {emotions} about {content} today. Remember that you're never alone in this. I'm with you in spirit every step of the way, celebrating your victories and supporting you through challenges.",
            "Families support each other through thick and thin. As you face {content} today, know that my love doesn't depend on outcomes or achievements. It's unconditional and always there for you.",
        ],
    }

    CLOSING_FUTURE_SELF = "With faith in us,\nYour future self"
    CLOSING_LOVED_ONE = "With love and support,\n{sender}"
    CLOSING_DEFAULT = "Sincerely,\n{sender}"

    FALLBACK_LOVED_ONE = "Someone who cares about you"
    FALLBACK_SENDER = "Your supporter"
