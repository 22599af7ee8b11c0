from flask import Response, current_app, request

from . import speech_api_bp


@speech_api_bp.route('', methods=['GET'])
def speak_api():
    """MP3 for ?text=...&lang=en-US|ja-JP. 204 if a newer request superseded it."""
    text = request.args.get('text', '')
    lang = request.args.get('lang', 'en-US')

    voice = current_app.extensions['scenelingo.shell'].voice
    utterance = voice.speak(text, lang)
    if utterance.cancelled:
        return Response(status=204)

    return Response(
        utterance.audio,
        mimetype=utterance.mime_type,
        headers={'Cache-Control': 'no-store', 'X-Utterance-Id': utterance.id},
    )
