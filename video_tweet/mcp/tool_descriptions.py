GET_YOUTUBE_TRANSCRIPT = (
    "Fetch the transcript from a YouTube video using the video URL or ID"
)

GENERATE_TWEETS_FROM_TRANSCRIPT = (
    "Generate engaging tweets from a transcript using intelligent content analysis"
)

CREATE_TYPEFULLY_DRAFT = "Create a draft in Typefully for later publishing"

PARAM_VIDEO_URL = "YouTube video URL or video ID"
PARAM_TRANSCRIPT = "The full transcript text to generate tweets from"
PARAM_PROMPT = "Custom prompt for tweet generation style and approach"
PARAM_MAX_TWEETS = "Maximum number of tweets to generate (1-10)"
PARAM_STYLE = "Style of tweets to generate"
PARAM_FORMAT = (
    "Format: 'thread' for multiple tweets or 'single' for one tweet under 280 chars"
)
PARAM_CONTENT = "The tweet content or thread to create as a draft"
PARAM_THREADIFY = "Whether to automatically split content into a thread"
PARAM_SCHEDULE_DATE = "Optional schedule time in ISO 8601 format or 'next-free-slot'"
PARAM_SHARE = "Whether to generate a shareable link for the draft"

# (H) Success summaries
TRANSCRIPT_FETCHED = (
    "🎥 **YouTube Transcript Fetched Successfully!**\n\n"
    "📺 **Video ID:** {video_id}\n"
    "🌍 **Language:** {language}\n"
    "⏱️ **Total Segments:** {segments}\n\n"
    "📝 **Full Transcript:**\n\n"
    "{text}\n\n"
    "💡 **Ready to generate content!** You can now use this transcript to:\n"
    '• Generate tweets with "generate_tweets_from_transcript"\n'
    "• Create social media content\n"
    "• Extract key insights"
)

TWEET_CONTEXT_PREPARED = (
    "🐦 **Tweet Generation Context Prepared**\n\n"
    "💭 **User Prompt:** {prompt}\n"
    "🎨 **Style:** {style}\n"
    "📊 **Format:** {format_description}\n"
    "🔢 **Max Tweets:** {max_tweets}\n\n"
    "🤖 **System Instructions:**\n"
    "{system_prompt}\n\n"
    "📋 **Generation Guidelines:**\n"
    "{instructions}\n\n"
    "✨ **Please create the {format_description_lower} based on this context!**"
)
FORMAT_SINGLE = "Single Tweet (280 chars max)"
FORMAT_THREAD = "Tweet Thread"

DRAFT_CREATED = (
    "📤 **Typefully Draft Created!**\n\n"
    "✅ **Draft ID:** {draft_id}\n"
    "📅 **Created:** {created}\n"
    "📊 **Status:** {status}\n"
    "🧵 **Threadified:** {threadified}\n"
    "🔗 **Share URL:** {share_url}\n"
)
YES = "Yes"
NO = "No"
NOT_SHARED = "Not shared"
