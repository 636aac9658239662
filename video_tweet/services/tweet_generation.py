from __future__ import annotations

from loguru import logger

from .. import constants as cs
from .. import logs as ls
from .. import prompts as pr
from ..schemas import TweetGenerationContext
from ..types_defs import TweetFormatName, TweetGenerationOptions, TweetStyleName


def clean_transcript(transcript: str) -> str:
    collapsed = cs.WHITESPACE_PATTERN.sub(" ", transcript)
    return cs.TRANSCRIPT_DISALLOWED_CHARS.sub("", collapsed).strip()


def build_system_prompt(
    style: TweetStyleName,
    tweet_format: TweetFormatName,
    include_emojis: bool,
    include_call_to_action: bool,
) -> str:
    format_guideline = (
        pr.FORMAT_GUIDELINE_SINGLE
        if tweet_format == cs.TweetFormat.SINGLE
        else pr.FORMAT_GUIDELINE_THREAD
    )
    return pr.TWEET_SYSTEM_PROMPT.format(
        style=style,
        style_guideline=pr.STYLE_GUIDELINES[style],
        format_guideline=format_guideline.format(limit=cs.TWEET_CHAR_LIMIT),
        emoji_guideline=(
            pr.EMOJI_GUIDELINE_ON if include_emojis else pr.EMOJI_GUIDELINE_OFF
        ),
        cta_guideline=(
            pr.CTA_GUIDELINE_ON if include_call_to_action else pr.CTA_GUIDELINE_OFF
        ),
        limit=cs.TWEET_CHAR_LIMIT,
    )


def build_instructions(
    tweet_format: TweetFormatName, max_tweets: int, user_prompt: str
) -> str:
    if tweet_format == cs.TweetFormat.SINGLE:
        format_instructions = pr.SINGLE_TWEET_INSTRUCTIONS.format(
            limit=cs.TWEET_CHAR_LIMIT
        )
    else:
        format_instructions = pr.THREAD_INSTRUCTIONS.format(
            max_tweets=max_tweets, limit=cs.TWEET_CHAR_LIMIT
        )
    return pr.TWEET_INSTRUCTIONS.format(
        user_prompt=user_prompt,
        format_instructions=format_instructions,
        limit=cs.TWEET_CHAR_LIMIT,
    )


class TweetGenerationService:
    """Prepares the context an LLM needs to write tweets from a transcript.

    No tweets are written here; the calling agent uses the returned system
    prompt and instructions to produce them itself.
    """

    def generate_tweet_context(
        self,
        transcript: str,
        prompt: str,
        options: TweetGenerationOptions | None = None,
    ) -> TweetGenerationContext:
        options = options or {}
        max_tweets = options.get("max_tweets", cs.DEFAULT_MAX_TWEETS)
        style = options.get("style", cs.DEFAULT_TWEET_STYLE.value)
        tweet_format = options.get("format", cs.DEFAULT_TWEET_FORMAT.value)
        include_emojis = options.get("include_emojis", True)
        include_call_to_action = options.get("include_call_to_action", True)

        logger.info(ls.TWEET_CONTEXT.format(style=style, format=tweet_format))

        return TweetGenerationContext(
            transcript=clean_transcript(transcript),
            prompt=prompt,
            format=tweet_format,
            style=style,
            max_tweets=1 if tweet_format == cs.TweetFormat.SINGLE else max_tweets,
            include_emojis=include_emojis,
            include_call_to_action=include_call_to_action,
            system_prompt=build_system_prompt(
                style, tweet_format, include_emojis, include_call_to_action
            ),
            instructions=build_instructions(tweet_format, max_tweets, prompt),
        )
