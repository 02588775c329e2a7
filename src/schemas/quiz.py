from pydantic import BaseModel

from services.voter_type_engine.models import ResultType, QuizContent, QuizResult
from services.voter_type_engine.result_images import ResultImage
from services.voter_type_engine.share import ResultPageMetadata

class ResultView(BaseModel):
    result_type: ResultType
    result: QuizResult
    image: ResultImage
    share_caption: str
    metadata: ResultPageMetadata
