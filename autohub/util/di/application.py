"""Application layer DI providers."""

from dishka import Scope, provide

from autohub.application.usecase.activity import (
    ClearActivitiesUseCase,
    ListActivitiesUseCase,
    ListUserActivitiesUseCase,
    MarkActivitiesReadUseCase,
)
from autohub.application.usecase.admin import (
    DashboardUseCase,
    GetSiteSettingsUseCase,
    UpdateSiteSettingsUseCase,
)
from autohub.application.usecase.auth import GetCurrentUserUseCase, RegisterUseCase
from autohub.application.usecase.blog import (
    AddCommentUseCase,
    AddReplyUseCase,
    CreatePostUseCase,
    DeleteCommentUseCase,
    DeletePostsUseCase,
    DeleteReplyUseCase,
    ListAllCommentsUseCase,
    ListCommentsUseCase,
    ListPostsUseCase,
    PopularTagsUseCase,
    ReadPostUseCase,
    RecentPostsUseCase,
    RelatedPostsUseCase,
    UpdatePostUseCase,
)
from autohub.application.usecase.business import (
    CreateBusinessUseCase,
    DeleteBusinessUseCase,
    GetBusinessUseCase,
    ListBusinessesUseCase,
    ListFeaturedBusinessesUseCase,
    ListOwnedBusinessesUseCase,
    ListPendingBusinessesUseCase,
    ModerateBusinessUseCase,
    SearchBusinessesUseCase,
    UpdateBusinessUseCase,
)
from autohub.application.usecase.category import (
    AddCategoryUseCase,
    DeleteCategoryUseCase,
    ListCategoriesUseCase,
    SeedCategoriesUseCase,
    UpdateCategoryUseCase,
)
from autohub.application.usecase.claim import (
    DecideClaimUseCase,
    ListPendingClaimsUseCase,
    SubmitClaimUseCase,
)
from autohub.application.usecase.question import (
    AcceptAnswerUseCase,
    AskQuestionUseCase,
    DeleteAnswerUseCase,
    DeleteQuestionUseCase,
    GetQuestionUseCase,
    ListQuestionsUseCase,
    PostAnswerUseCase,
    UpdateQuestionUseCase,
    VoteUseCase,
)
from autohub.application.usecase.review import (
    AddReviewUseCase,
    DeleteReviewUseCase,
    ListAllReviewsUseCase,
    ListReviewsUseCase,
)
from autohub.application.usecase.user import (
    CreateUserUseCase,
    DeleteUserUseCase,
    ListUsersUseCase,
    UpdateUserUseCase,
)
from autohub.application.usecase.vehicle import (
    AddVehicleUseCase,
    DeleteVehiclesUseCase,
    GetVehicleUseCase,
    ListRecentVehiclesUseCase,
    ListVehiclesUseCase,
    UpdateVehicleUseCase,
)
from autohub.domain.service import (
    ActivityService,
    BlogService,
    BusinessService,
    CategoryService,
    ClaimService,
    CommentService,
    DashboardService,
    JWTService,
    QuestionService,
    ReviewService,
    SiteSettingsService,
    UserService,
    VehicleService,
)
from autohub.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_register_use_case(
        self,
        user_service: UserService,
        site_settings_service: SiteSettingsService,
        jwt_service: JWTService,
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(
            user_service=user_service,
            site_settings_service=site_settings_service,
            jwt_service=jwt_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(jwt_service=jwt_service, user_service=user_service)

    # Question use cases
    @provide(scope=Scope.REQUEST)
    def get_ask_question_use_case(
        self, question_service: QuestionService, user_service: UserService
    ) -> AskQuestionUseCase:
        """Provide ask question use case."""
        return AskQuestionUseCase(
            question_service=question_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_question_use_case(
        self, question_service: QuestionService
    ) -> GetQuestionUseCase:
        """Provide get question use case."""
        return GetQuestionUseCase(question_service=question_service)

    @provide(scope=Scope.REQUEST)
    def get_list_questions_use_case(
        self, question_service: QuestionService
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(question_service=question_service)

    @provide(scope=Scope.REQUEST)
    def get_update_question_use_case(
        self, question_service: QuestionService, user_service: UserService
    ) -> UpdateQuestionUseCase:
        """Provide update question use case."""
        return UpdateQuestionUseCase(
            question_service=question_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_question_use_case(
        self, question_service: QuestionService, user_service: UserService
    ) -> DeleteQuestionUseCase:
        """Provide delete question use case."""
        return DeleteQuestionUseCase(
            question_service=question_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_vote_use_case(
        self, question_service: QuestionService, user_service: UserService
    ) -> VoteUseCase:
        """Provide vote use case."""
        return VoteUseCase(question_service=question_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_post_answer_use_case(
        self, question_service: QuestionService, user_service: UserService
    ) -> PostAnswerUseCase:
        """Provide post answer use case."""
        return PostAnswerUseCase(
            question_service=question_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_accept_answer_use_case(
        self, question_service: QuestionService, user_service: UserService
    ) -> AcceptAnswerUseCase:
        """Provide accept answer use case."""
        return AcceptAnswerUseCase(
            question_service=question_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_answer_use_case(
        self, question_service: QuestionService, user_service: UserService
    ) -> DeleteAnswerUseCase:
        """Provide delete answer use case."""
        return DeleteAnswerUseCase(
            question_service=question_service, user_service=user_service
        )

    # Business use cases
    @provide(scope=Scope.REQUEST)
    def get_create_business_use_case(
        self, business_service: BusinessService, user_service: UserService
    ) -> CreateBusinessUseCase:
        """Provide create business use case."""
        return CreateBusinessUseCase(
            business_service=business_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_business_use_case(
        self, business_service: BusinessService, user_service: UserService
    ) -> UpdateBusinessUseCase:
        """Provide update business use case."""
        return UpdateBusinessUseCase(
            business_service=business_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_business_use_case(
        self, business_service: BusinessService, user_service: UserService
    ) -> DeleteBusinessUseCase:
        """Provide delete business use case."""
        return DeleteBusinessUseCase(
            business_service=business_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_moderate_business_use_case(
        self, business_service: BusinessService, user_service: UserService
    ) -> ModerateBusinessUseCase:
        """Provide moderate business use case."""
        return ModerateBusinessUseCase(
            business_service=business_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_business_use_case(
        self, business_service: BusinessService
    ) -> GetBusinessUseCase:
        """Provide get business use case."""
        return GetBusinessUseCase(business_service=business_service)

    @provide(scope=Scope.REQUEST)
    def get_list_businesses_use_case(
        self, business_service: BusinessService
    ) -> ListBusinessesUseCase:
        """Provide public directory use case."""
        return ListBusinessesUseCase(business_service=business_service)

    @provide(scope=Scope.REQUEST)
    def get_list_featured_businesses_use_case(
        self, business_service: BusinessService
    ) -> ListFeaturedBusinessesUseCase:
        """Provide featured listings use case."""
        return ListFeaturedBusinessesUseCase(business_service=business_service)

    @provide(scope=Scope.REQUEST)
    def get_list_owned_businesses_use_case(
        self, business_service: BusinessService
    ) -> ListOwnedBusinessesUseCase:
        """Provide owned listings use case."""
        return ListOwnedBusinessesUseCase(business_service=business_service)

    @provide(scope=Scope.REQUEST)
    def get_list_pending_businesses_use_case(
        self, business_service: BusinessService, user_service: UserService
    ) -> ListPendingBusinessesUseCase:
        """Provide moderation queue use case."""
        return ListPendingBusinessesUseCase(
            business_service=business_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_search_businesses_use_case(
        self, business_service: BusinessService, user_service: UserService
    ) -> SearchBusinessesUseCase:
        """Provide admin business search use case."""
        return SearchBusinessesUseCase(
            business_service=business_service, user_service=user_service
        )

    # Review use cases
    @provide(scope=Scope.REQUEST)
    def get_add_review_use_case(
        self, review_service: ReviewService, user_service: UserService
    ) -> AddReviewUseCase:
        """Provide add review use case."""
        return AddReviewUseCase(review_service=review_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_list_reviews_use_case(self, review_service: ReviewService) -> ListReviewsUseCase:
        """Provide list reviews use case."""
        return ListReviewsUseCase(review_service=review_service)

    @provide(scope=Scope.REQUEST)
    def get_list_all_reviews_use_case(
        self, review_service: ReviewService, user_service: UserService
    ) -> ListAllReviewsUseCase:
        """Provide list all reviews use case."""
        return ListAllReviewsUseCase(
            review_service=review_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_review_use_case(
        self, review_service: ReviewService, user_service: UserService
    ) -> DeleteReviewUseCase:
        """Provide delete review use case."""
        return DeleteReviewUseCase(
            review_service=review_service, user_service=user_service
        )

    # Claim use cases
    @provide(scope=Scope.REQUEST)
    def get_submit_claim_use_case(
        self, claim_service: ClaimService, user_service: UserService
    ) -> SubmitClaimUseCase:
        """Provide submit claim use case."""
        return SubmitClaimUseCase(claim_service=claim_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_list_pending_claims_use_case(
        self, claim_service: ClaimService, user_service: UserService
    ) -> ListPendingClaimsUseCase:
        """Provide claims queue use case."""
        return ListPendingClaimsUseCase(
            claim_service=claim_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_decide_claim_use_case(
        self, claim_service: ClaimService, user_service: UserService
    ) -> DecideClaimUseCase:
        """Provide decide claim use case."""
        return DecideClaimUseCase(claim_service=claim_service, user_service=user_service)

    # Activity use cases
    @provide(scope=Scope.REQUEST)
    def get_list_activities_use_case(
        self, activity_service: ActivityService, user_service: UserService
    ) -> ListActivitiesUseCase:
        """Provide list activities use case."""
        return ListActivitiesUseCase(
            activity_service=activity_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_list_user_activities_use_case(
        self, activity_service: ActivityService, user_service: UserService
    ) -> ListUserActivitiesUseCase:
        """Provide recent activities use case."""
        return ListUserActivitiesUseCase(
            activity_service=activity_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_mark_activities_read_use_case(
        self, activity_service: ActivityService, user_service: UserService
    ) -> MarkActivitiesReadUseCase:
        """Provide mark activities read use case."""
        return MarkActivitiesReadUseCase(
            activity_service=activity_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_clear_activities_use_case(
        self, activity_service: ActivityService, user_service: UserService
    ) -> ClearActivitiesUseCase:
        """Provide clear activities use case."""
        return ClearActivitiesUseCase(
            activity_service=activity_service, user_service=user_service
        )

    # User management use cases
    @provide(scope=Scope.REQUEST)
    def get_list_users_use_case(self, user_service: UserService) -> ListUsersUseCase:
        """Provide list users use case."""
        return ListUsersUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_create_user_use_case(self, user_service: UserService) -> CreateUserUseCase:
        """Provide create user use case."""
        return CreateUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_update_user_use_case(self, user_service: UserService) -> UpdateUserUseCase:
        """Provide update user use case."""
        return UpdateUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_user_use_case(self, user_service: UserService) -> DeleteUserUseCase:
        """Provide delete user use case."""
        return DeleteUserUseCase(user_service=user_service)

    # Admin use cases
    @provide(scope=Scope.REQUEST)
    def get_get_site_settings_use_case(
        self, site_settings_service: SiteSettingsService
    ) -> GetSiteSettingsUseCase:
        """Provide get site settings use case."""
        return GetSiteSettingsUseCase(site_settings_service=site_settings_service)

    @provide(scope=Scope.REQUEST)
    def get_update_site_settings_use_case(
        self, site_settings_service: SiteSettingsService, user_service: UserService
    ) -> UpdateSiteSettingsUseCase:
        """Provide update site settings use case."""
        return UpdateSiteSettingsUseCase(
            site_settings_service=site_settings_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_dashboard_use_case(
        self, dashboard_service: DashboardService, user_service: UserService
    ) -> DashboardUseCase:
        """Provide dashboard use case."""
        return DashboardUseCase(
            dashboard_service=dashboard_service, user_service=user_service
        )

    # Vehicle use cases
    @provide(scope=Scope.REQUEST)
    def get_get_vehicle_use_case(self, vehicle_service: VehicleService) -> GetVehicleUseCase:
        """Provide get vehicle use case."""
        return GetVehicleUseCase(vehicle_service=vehicle_service)

    @provide(scope=Scope.REQUEST)
    def get_list_vehicles_use_case(
        self, vehicle_service: VehicleService
    ) -> ListVehiclesUseCase:
        """Provide catalogue listing use case."""
        return ListVehiclesUseCase(vehicle_service=vehicle_service)

    @provide(scope=Scope.REQUEST)
    def get_list_recent_vehicles_use_case(
        self, vehicle_service: VehicleService
    ) -> ListRecentVehiclesUseCase:
        """Provide recent vehicles use case."""
        return ListRecentVehiclesUseCase(vehicle_service=vehicle_service)

    @provide(scope=Scope.REQUEST)
    def get_add_vehicle_use_case(
        self, vehicle_service: VehicleService, user_service: UserService
    ) -> AddVehicleUseCase:
        """Provide add vehicle use case."""
        return AddVehicleUseCase(vehicle_service=vehicle_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_update_vehicle_use_case(
        self, vehicle_service: VehicleService, user_service: UserService
    ) -> UpdateVehicleUseCase:
        """Provide update vehicle use case."""
        return UpdateVehicleUseCase(
            vehicle_service=vehicle_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_vehicles_use_case(
        self, vehicle_service: VehicleService, user_service: UserService
    ) -> DeleteVehiclesUseCase:
        """Provide delete vehicles use case."""
        return DeleteVehiclesUseCase(
            vehicle_service=vehicle_service, user_service=user_service
        )

    # Blog use cases
    @provide(scope=Scope.REQUEST)
    def get_read_post_use_case(self, blog_service: BlogService) -> ReadPostUseCase:
        """Provide read post use case."""
        return ReadPostUseCase(blog_service=blog_service)

    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(self, blog_service: BlogService) -> ListPostsUseCase:
        """Provide blog index use case."""
        return ListPostsUseCase(blog_service=blog_service)

    @provide(scope=Scope.REQUEST)
    def get_recent_posts_use_case(self, blog_service: BlogService) -> RecentPostsUseCase:
        """Provide recent posts use case."""
        return RecentPostsUseCase(blog_service=blog_service)

    @provide(scope=Scope.REQUEST)
    def get_related_posts_use_case(
        self, blog_service: BlogService
    ) -> RelatedPostsUseCase:
        """Provide related posts use case."""
        return RelatedPostsUseCase(blog_service=blog_service)

    @provide(scope=Scope.REQUEST)
    def get_popular_tags_use_case(self, blog_service: BlogService) -> PopularTagsUseCase:
        """Provide popular tags use case."""
        return PopularTagsUseCase(blog_service=blog_service)

    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self, blog_service: BlogService, user_service: UserService
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(blog_service=blog_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_update_post_use_case(
        self, blog_service: BlogService, user_service: UserService
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(blog_service=blog_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_posts_use_case(
        self, blog_service: BlogService, user_service: UserService
    ) -> DeletePostsUseCase:
        """Provide delete posts use case."""
        return DeletePostsUseCase(blog_service=blog_service, user_service=user_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self, comment_service: CommentService
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_list_all_comments_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> ListAllCommentsUseCase:
        """Provide moderators' comment listing use case."""
        return ListAllCommentsUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_add_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(comment_service=comment_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_add_reply_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> AddReplyUseCase:
        """Provide add reply use case."""
        return AddReplyUseCase(comment_service=comment_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_reply_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> DeleteReplyUseCase:
        """Provide delete reply use case."""
        return DeleteReplyUseCase(
            comment_service=comment_service, user_service=user_service
        )

    # Category use cases
    @provide(scope=Scope.REQUEST)
    def get_list_categories_use_case(
        self, category_service: CategoryService
    ) -> ListCategoriesUseCase:
        """Provide list categories use case."""
        return ListCategoriesUseCase(category_service=category_service)

    @provide(scope=Scope.REQUEST)
    def get_add_category_use_case(
        self, category_service: CategoryService, user_service: UserService
    ) -> AddCategoryUseCase:
        """Provide add category use case."""
        return AddCategoryUseCase(
            category_service=category_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_category_use_case(
        self, category_service: CategoryService, user_service: UserService
    ) -> UpdateCategoryUseCase:
        """Provide update category use case."""
        return UpdateCategoryUseCase(
            category_service=category_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_category_use_case(
        self, category_service: CategoryService, user_service: UserService
    ) -> DeleteCategoryUseCase:
        """Provide delete category use case."""
        return DeleteCategoryUseCase(
            category_service=category_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_seed_categories_use_case(
        self, category_service: CategoryService, user_service: UserService
    ) -> SeedCategoriesUseCase:
        """Provide seed categories use case."""
        return SeedCategoriesUseCase(
            category_service=category_service, user_service=user_service
        )
