"""
Hook catalog views
"""

from rest_framework.response import Response
from rest_framework.views import APIView

from script_engine.hooks import HOOKS, get_hooks_by_tone


class HookListView(APIView):
    """Lists hook templates, optionally filtered with ?tone="""

    def get(self, request):
        tone = request.query_params.get("tone")
        hooks = get_hooks_by_tone(tone) if tone else HOOKS
        return Response([hook.model_dump() for hook in hooks])
