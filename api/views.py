"""
Content preview API for the contributor editor.
"""
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.authentication import SessionAuthentication
from .serializers import ContentPreviewSerializer
from wiki.services.autolink_service import AutoLinkService
from wiki.services.content_renderer import ContentRenderer
from wiki.services.editor_service import EditorService
import logging

logger = logging.getLogger(__name__)


class ContentPreviewView(APIView):
    """Render editor content exactly as the encyclopedia page will show it."""
    authentication_classes = [SessionAuthentication]
    permission_classes = [IsAuthenticated]

    def post(self, request):
        """
        POST /api/v1/preview/
        Body:
            - content (required)
            - content_format (html/markdown) - detected when omitted
            - autolink (bool, default: true)
        Query params:
            - output (html/markdown) - default: html. If markdown, returns the
              stored Markdown form of the submitted editor HTML
        """
        serializer = ContentPreviewSerializer(data=request.data)
        if not serializer.is_valid():
            return Response({'error': serializer.errors}, status=status.HTTP_400_BAD_REQUEST)

        content = serializer.validated_data['content']
        content_format = serializer.validated_data.get('content_format')
        output = request.query_params.get('output', 'html')

        if output == 'markdown':
            return Response({'markdown': EditorService.html_to_markdown(content)})

        entities = AutoLinkService.get_linkable_entities() if serializer.validated_data['autolink'] else None
        html = ContentRenderer.render(content, entities=entities, content_format=content_format)
        resolved_format = str(ContentRenderer.resolve_format(content, content_format)) if content else None

        logger.debug(f"Preview rendered for user {request.user.pk}: {len(content)} chars")
        return Response({'html': str(html), 'content_format': resolved_format})
