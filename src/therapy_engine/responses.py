"""Curated response pools for the therapist persona."""

from typing import Dict, Tuple

from .classifier import EmotionTag

CRISIS_RESPONSE = (
    "I'm very concerned about what you're sharing with me. Your safety is the "
    "most important thing right now. If you're having thoughts of hurting "
    "yourself, please reach out to a crisis line immediately: call or text 988 "
    "(Suicide & Crisis Lifeline) or go to your nearest emergency room. I'm here "
    "to support you, but please contact a professional right now."
)

GREETING_RESPONSES: Tuple[str, ...] = (
    "Hello, it's good to see you here. How are you feeling today?",
    "Hi there. I'm glad you stopped by. What's on your mind right now?",
    "Hey, welcome. This is a safe space to share whatever you're carrying. Where would you like to start?",
    "Hello. Thank you for reaching out today. How has your day been so far?",
)

CASUAL_HOW_ARE_YOU: Tuple[str, ...] = (
    "Thank you for asking, I'm here and ready to listen. More importantly, how are you doing today?",
    "I'm doing well, thanks for checking in. I'd love to hear how things are going for you.",
)

CASUAL_THANKS: Tuple[str, ...] = (
    "You're very welcome. I'm glad this was helpful. Is there anything else you'd like to talk about?",
    "It means a lot that you shared with me. I'm here whenever you need to talk.",
)

CASUAL_GOODBYE: Tuple[str, ...] = (
    "Take good care of yourself. I'm here whenever you want to talk again.",
    "Goodbye for now. Remember to be gentle with yourself, and come back anytime.",
)

CASUAL_GENERIC: Tuple[str, ...] = (
    "I'm here with you. What would you like to talk about today?",
    "Thanks for checking in. Is there anything on your mind you'd like to explore?",
)

EMOTION_RESPONSES: Dict[EmotionTag, Tuple[str, ...]] = {
    EmotionTag.ANXIETY: (
        "Anxiety can feel overwhelming, like your mind is racing with worst-case scenarios. Let's take a moment to ground ourselves. Can you tell me five things you can see around you right now?",
        "I can hear the anxiety in what you're sharing. Your nervous system is on high alert right now. What does the anxiety feel like in your body?",
        "Anxiety often tries to convince us that we're in immediate danger, even when we're safe. What thoughts are contributing most to this anxious feeling?",
        "When you're feeling anxious like this, what usually helps you feel more grounded?",
    ),
    EmotionTag.DEPRESSION: (
        "Depression can make everything feel heavy and colorless. It takes courage to reach out when you're feeling this way. What's been the hardest part of your day today?",
        "That feeling of emptiness can be like being disconnected from yourself and the world around you. You're not alone in this. What used to bring you joy that feels hard to reach right now?",
        "Depression lies to us about our worth and our future. When you're feeling worthless, what does that voice sound like?",
    ),
    EmotionTag.ANGER: (
        "Anger is often pain or hurt wearing a protective mask. What might be underneath the anger you're feeling right now?",
        "When anger feels explosive like this, it's usually because a lot has been building up for a long time. What first lit that fuse?",
        "Your anger is telling us something important about your boundaries, your values, or your needs. What is it trying to protect?",
    ),
    EmotionTag.GRIEF: (
        "Grief is love with nowhere to go. What do you miss most about them, beyond just their physical presence?",
        "Loss changes everything, and there's no timeline for grief despite what others might say. How has your grief been showing up for you lately?",
        "The pain of loss reflects the depth of your love and connection. Grief isn't something we get over, it's something we learn to carry. How are you being gentle with yourself through this?",
    ),
    EmotionTag.LONELINESS: (
        "Loneliness can hurt in a very real way, even when people are nearby. When do you notice it most during your day?",
        "Feeling disconnected from others is more common than it seems, and it doesn't mean something is wrong with you. Who, if anyone, do you feel even a little connected to right now?",
        "I'm glad you reached out instead of sitting with this alone. What kind of connection do you find yourself missing most?",
    ),
    EmotionTag.FEAR: (
        "Fear can take up so much space in our minds. What is the fear telling you might happen?",
        "It makes sense to feel afraid when something feels threatening. Where do you feel safest right now, even a little?",
        "Let's slow down together for a moment. If you name the fear out loud, what does it sound like?",
    ),
    EmotionTag.STRESS: (
        "It sounds like you're carrying a heavy load right now. What feels like the biggest source of pressure at the moment?",
        "Stress can build up until everything feels urgent. If you could set one thing down for today, what would it be?",
        "Burnout often creeps in when we keep giving without refilling. What has been helping you recharge, even in small ways?",
    ),
    EmotionTag.SHAME: (
        "Shame can make us want to hide, so it means a lot that you're talking about it. What happened that left you feeling this way?",
        "Guilt and shame often speak in a very harsh voice. Would you talk to a close friend the way you're talking to yourself right now?",
        "Everyone makes mistakes, and feeling ashamed doesn't define who you are. What would self-compassion look like in this moment?",
    ),
    EmotionTag.CONFUSION: (
        "It's okay not to have everything figured out. What part of this feels most unclear to you right now?",
        "When we feel pulled in different directions, it can help to slow down and untangle one thread at a time. Which thread feels most pressing?",
        "Uncertainty can be really uncomfortable. What would help you feel even a little more clear about the next step?",
    ),
    EmotionTag.HAPPINESS: (
        "That's wonderful to hear! What specifically about this experience feels good to you?",
        "I can hear the positivity in what you're sharing. What do you think contributed to feeling this way?",
        "It sounds like things are going well for you right now. How can we build on these positive feelings?",
    ),
    EmotionTag.HOPE: (
        "I can hear some hope in what you're saying, and that matters. What's helping you feel this way?",
        "It's encouraging to hear things are starting to shift. What would you like to keep doing to support that progress?",
        "Hope can be a powerful anchor. What are you most looking forward to?",
    ),
}

# Precedence for choosing the dominant emotion when several match
EMOTION_PRECEDENCE: Tuple[EmotionTag, ...] = (
    EmotionTag.ANXIETY,
    EmotionTag.DEPRESSION,
    EmotionTag.ANGER,
    EmotionTag.GRIEF,
    EmotionTag.LONELINESS,
    EmotionTag.FEAR,
    EmotionTag.STRESS,
    EmotionTag.SHAME,
    EmotionTag.CONFUSION,
    EmotionTag.HAPPINESS,
    EmotionTag.HOPE,
)

MODALITY_RESPONSES: Dict[str, Tuple[str, ...]] = {
    "cbt": (
        "Let's pause and examine the thoughts that were running through your mind in that moment. What was the first automatic thought that popped up?",
        "I'm noticing a thinking pattern here that might be worth exploring. What evidence supports this thought, and what evidence might challenge it?",
        "Sometimes our minds make situations seem worse than they are. If your best friend came to you with this exact same thought, what would you tell them?",
    ),
    "dbt": (
        "Let's practice some mindfulness right now. Can you take a deep breath with me and notice what you're feeling in your body at this moment?",
        "This sounds like a moment where distress tolerance skills could really help. When emotions feel this intense, what techniques have you tried before?",
        "Let's practice holding space for this feeling without trying to fix it right away. What would it look like to be compassionate with yourself right now?",
    ),
    "mindfulness": (
        "Let's take a slow breath together. As you breathe out, what do you notice in your body right now?",
        "Without judging it, can you simply name what you're feeling in this moment?",
        "Try bringing your attention to the present for a moment. What can you hear, see, and feel around you?",
    ),
    "solution_focused": (
        "Imagine you woke up tomorrow and things were a little better. What would be the first sign that something had changed?",
        "On a scale from one to ten, where would you place things right now? What would move you up just one point?",
        "Think of a time when this problem was less present. What were you doing differently then?",
    ),
}

GENERAL_RESPONSES: Tuple[str, ...] = (
    "I'm really glad you shared that with me. What feels most important for us to focus on right now?",
    "I can sense there's a lot going on for you. What would be most helpful to explore together?",
    "Thank you for opening up about this. What thoughts or feelings are strongest for you as you talk about it?",
    "I appreciate you trusting me with what you're experiencing. What stands out most to you about this situation?",
    "It sounds like this is really significant for you. Can you help me understand what it means to you?",
    "I want to make sure I understand what you're going through. What would you like me to know about your experience?",
)
