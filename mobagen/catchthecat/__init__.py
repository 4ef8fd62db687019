"""Reserved for the Catch the Cat game; it holds no modules yet."""