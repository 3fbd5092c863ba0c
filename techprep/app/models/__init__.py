from techprep.app.models.resume import Resume, ResumeQuestion
from techprep.app.models.technical_question import ExpectedAnswer, MCQOption, TechnicalQuestion
from techprep.app.models.user_response import UserResponse
